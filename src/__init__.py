"""
ace_editor - Ace code editor integration for content pipelines

Turns inline <ace>...</ace> directives into embedded code editors.
"""

__version__ = "1.0.0"

from .lib import (
    AceFilter,
    AceFormatter,
    AceEditor,
    DirectiveExtractor,
    LibraryRegistry,
    RenderContext,
    render_scope,
    ConfigStore,
    ConfigError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "AceFilter",
    "AceFormatter",
    "AceEditor",
    "DirectiveExtractor",
    "LibraryRegistry",
    "RenderContext",
    "render_scope",
    "ConfigStore",
    "ConfigError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
