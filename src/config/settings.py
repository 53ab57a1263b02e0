"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ACE_EDITOR_ prefix (e.g., ACE_EDITOR_ELEMENT_ID_PREFIX=code-).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use ACE_EDITOR_ prefix.

    Examples:
        ACE_EDITOR_ELEMENT_ID_PREFIX=ace-inline-
        ACE_EDITOR_SETTINGS_FILE=/etc/ace_editor.settings.yml
    """

    model_config = SettingsConfigDict(
        env_prefix="ACE_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Placeholder configuration
    element_id_prefix: str = Field(
        default="ace-editor-inline",
        description="Prefix for the id attribute of generated editor placeholders",
    )

    placeholder_tag: str = Field(
        default="pre",
        description="Block element emitted in place of each <ace> directive",
    )

    # Library configuration
    library_namespace: str = Field(
        default="ace_editor",
        description="Namespace prepended to every attached library name",
    )

    filter_library: str = Field(
        default="filter",
        description="Base library attached whenever the filter finds a directive",
    )

    formatter_library: str = Field(
        default="formatter",
        description="Base library attached by the field formatter",
    )

    editor_library: str = Field(
        default="primary",
        description="Base library attached by the text editor integration",
    )

    # Storage configuration
    settings_file: Optional[str] = Field(
        default=None,
        description="Path to an ace_editor.settings.yml overriding the packaged defaults",
    )

    def elementId_make(self, scope_id: str, index: int) -> str:
        """
        Generate the element id for the index-th editor instance of a render scope.

        Example:
            >>> settings = AppSettings()
            >>> settings.elementId_make('3f2a', 1)
            'ace-editor-inline3f2a-1'
        """
        return f"{self.element_id_prefix}{scope_id}-{index}"

    def placeholder_make(self, element_id: str) -> str:
        """
        Build the empty block element that marks where an editor is initialized.

        Example:
            >>> AppSettings().placeholder_make('ace-editor-inline3f2a-1')
            '<pre id="ace-editor-inline3f2a-1"></pre>'
        """
        return f'<{self.placeholder_tag} id="{element_id}"></{self.placeholder_tag}>'

    def library_qualify(self, name: str) -> str:
        """Prefix a bare library name with the namespace (``theme.monokai`` -> ``ace_editor/theme.monokai``)"""
        return f"{self.library_namespace}/{name}"


# Singleton instance - import this in your code
appsettings = AppSettings()
