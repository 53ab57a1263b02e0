"""
Text filter turning <ace> directives into embedded code editors

Authors write

    <ace theme="monokai" syntax="python" line-numbers="0">
    print("hello")
    </ace>

and the filter emits an empty placeholder element in its place, plus page
settings telling the front-end script what to mount there. Tag attributes
override the filter's configured settings for that one editor.
"""

from typing import Any, Dict, Mapping, Optional

from ..models.editor import AttributeSet, FilterProcessResult
from ..models.forms import FormField
from .extractor import DirectiveExtractor
from .forms import settingsForm_build
from .libraries import LibraryRegistry
from .log import LOG
from .render import RenderContext, render_current
from .store import ConfigStore

# Settings key under which the page manifest is exposed to the client
JS_SETTINGS_KEY = 'ace_filter'

DEFAULT_SETTINGS: Dict[str, Any] = {
    'theme': 'cobalt',
    'syntax': 'html',
    'height': '500px',
    'width': '700px',
    'font_size': '12pt',
    'line_numbers': 1,
    'show_invisibles': 0,
    'print_margins': 1,
    'auto_complete': 1,
    'use_wrap_mode': 1,
}


class AceFilter:
    """
    Filter for inline <ace>...</ace> directives
    """

    def __init__(
        self,
        settings: Optional[Mapping[str, Any]] = None,
        store: Optional[ConfigStore] = None,
        libraries: Optional[LibraryRegistry] = None,
    ) -> None:
        """
        Args:
            settings: Filter configuration, merged over DEFAULT_SETTINGS
            store: Configuration store for the theme/syntax catalogs
            libraries: Registry used to check theme/mode bundles
        """
        self.store = store if store is not None else ConfigStore()
        self.libraries = libraries if libraries is not None else LibraryRegistry(self.store)
        self.extractor = DirectiveExtractor(self.libraries)
        self.settings: AttributeSet = {**DEFAULT_SETTINGS, **(settings or {})}

    def settingsForm_get(self) -> Dict[str, FormField]:
        """Form fields for configuring this filter"""
        return settingsForm_build(self.settings, self.store)

    def process(self, text: str, langcode: str = 'en') -> FilterProcessResult:
        """
        Filter text, registering every <ace> directive with the active render

        Instances accumulate in the manifest of the current render scope, so
        the returned settings always describe every editor on the page so
        far. Outside any render scope a single-use context is used.

        Args:
            text: Markup to filter
            langcode: Language of the text (accepted for host compatibility)

        Returns:
            FilterProcessResult; without directives, the unchanged text and
            no attachments
        """
        context = render_current()
        if context is None:
            LOG("No active render scope, using a single-use context", level=3)
            context = RenderContext()

        filtered, delta = self.extractor.process(text, self.settings, context.elementId_next)

        if delta.empty_is():
            return FilterProcessResult(text=filtered)

        manifest = context.manifest_ensure(self.settings)
        manifest.delta_merge(delta)
        LOG(f"Page manifest now holds {len(manifest.instances)} editor(s) [{langcode}]", level=2)

        return FilterProcessResult(
            text=filtered,
            libraries=list(delta.libraries),
            settings={JS_SETTINGS_KEY: manifest.js_settings()},
        )

    def tips_get(self) -> str:
        """Short usage help shown alongside the text format"""
        return (
            "Use <ace> and </ace> tags to show code with syntax highlighting. "
            "Add attributes such as theme, syntax, height, width, font-size or "
            "line-numbers to the <ace> tag to control formatting."
        )
