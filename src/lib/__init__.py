"""
ace_editor - Ace code editor integration for content pipelines

Inline <ace> directive filter, read-only field formatter and editor
library resolution.
"""

__version__ = "1.0.0"

from .filter import AceFilter
from .formatter import AceFormatter
from .editor import AceEditor
from .extractor import DirectiveExtractor
from .libraries import LibraryRegistry
from .render import RenderContext, render_scope, render_current
from .store import ConfigStore, ConfigError
from .log import LOG, state_connectToLogger

__all__ = [
    "AceFilter",
    "AceFormatter",
    "AceEditor",
    "DirectiveExtractor",
    "LibraryRegistry",
    "RenderContext",
    "render_scope",
    "render_current",
    "ConfigStore",
    "ConfigError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
