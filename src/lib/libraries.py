"""
Library registry for ace_editor asset bundles.

Bundles are named without namespace:
  - primary, filter, formatter: base bundles for the editor integration,
    the inline filter and the field formatter
  - theme.<key>: one per entry in the settings theme_list
  - mode.<key>: one per entry in the settings syntax_list

Attached library names are qualified with the namespace from AppSettings,
e.g. ``ace_editor/theme.monokai``.
"""

from typing import Iterable, Optional, Set

from ..config import appsettings, AppSettings
from .store import ConfigStore


class LibraryRegistry:
    """
    Answers whether a named asset bundle exists.
    """

    def __init__(
        self,
        store: Optional[ConfigStore] = None,
        extra: Iterable[str] = (),
        settings: AppSettings = appsettings,
    ) -> None:
        """
        Build the registry from the theme and syntax catalogs.

        Args:
            store: Configuration store supplying theme_list and syntax_list
            extra: Additional bundle names to register
            settings: Application settings (namespace and base bundle names)
        """
        self.settings = settings
        self.names: Set[str] = {
            settings.editor_library,
            settings.filter_library,
            settings.formatter_library,
        }
        if store is None:
            store = ConfigStore()
        for theme in store.themes_list():
            self.names.add(self.theme_name(theme))
        for syntax in store.syntaxes_list():
            self.names.add(self.mode_name(syntax))
        self.names.update(extra)

    @staticmethod
    def theme_name(theme: object) -> str:
        return f"theme.{theme}"

    @staticmethod
    def mode_name(syntax: object) -> str:
        return f"mode.{syntax}"

    def register(self, name: str) -> None:
        """Register an additional bundle name"""
        self.names.add(name)

    def exists(self, name: str) -> bool:
        """Check if a bundle is registered under this bare name"""
        return name in self.names

    def theme_exists(self, theme: object) -> bool:
        return self.exists(self.theme_name(theme))

    def mode_exists(self, syntax: object) -> bool:
        return self.exists(self.mode_name(syntax))

    def qualify(self, name: str) -> str:
        """Namespace a bare bundle name for attachment"""
        return self.settings.library_qualify(name)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)
