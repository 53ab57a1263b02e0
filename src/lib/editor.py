"""
Text editor integration: Ace as the editor for textarea-based formats.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..config import appsettings
from ..models.forms import FormField
from .forms import settingsForm_build
from .libraries import LibraryRegistry
from .log import LOG
from .store import ConfigStore

SUPPORTED_ELEMENT_TYPES = ('textarea',)

# Editor settings are stored under this key of the editor configuration
FIELDSET_KEY = 'fieldset'


class AceEditor:
    """
    Editor plugin resolving libraries and client settings for a configured editor
    """

    def __init__(self, store: Optional[ConfigStore] = None, libraries: Optional[LibraryRegistry] = None) -> None:
        self.store = store if store is not None else ConfigStore()
        self.libraries = libraries if libraries is not None else LibraryRegistry(self.store)

    def defaultSettings_get(self) -> Dict[str, Any]:
        return self.store.defaults()

    def settingsForm_get(self, settings: Mapping[str, Any]) -> Dict[str, Dict[str, FormField]]:
        """
        Settings form for an editor configuration

        Args:
            settings: Current editor settings (the fieldset values)

        Returns:
            {'fieldset': {key: FormField, ...}}
        """
        return {FIELDSET_KEY: settingsForm_build(settings, self.store)}

    def libraries_get(self, editor_settings: Mapping[str, Any]) -> List[str]:
        """
        Libraries needed to run an editor with the given configuration

        The primary bundle always comes first, then the theme and mode
        bundles. A theme or syntax without a registered bundle falls back
        to the global default.

        Args:
            editor_settings: Editor configuration holding a 'fieldset' mapping

        Returns:
            Qualified library names, e.g.
            ['ace_editor/primary', 'ace_editor/theme.monokai', 'ace_editor/mode.php']
        """
        fieldset = editor_settings.get(FIELDSET_KEY, {})
        theme = str(fieldset.get('theme', '')).strip()
        syntax = str(fieldset.get('syntax', '')).strip()

        if not self.libraries.theme_exists(theme):
            LOG(f"Theme '{theme}' not registered, using default", level=2)
            theme = self.store.get('theme')
        if not self.libraries.mode_exists(syntax):
            LOG(f"Syntax '{syntax}' not registered, using default", level=2)
            syntax = self.store.get('syntax')

        return [
            appsettings.library_qualify(appsettings.editor_library),
            self.libraries.qualify(self.libraries.theme_name(theme)),
            self.libraries.qualify(self.libraries.mode_name(syntax)),
        ]

    def jsSettings_get(self, editor_settings: Mapping[str, Any]) -> Dict[str, Any]:
        """Settings passed to the client for this editor"""
        return dict(editor_settings.get(FIELDSET_KEY, {}))
