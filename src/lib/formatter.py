"""
Field formatter displaying long text values in read-only editors

Each field item becomes a read-only textarea wrapped in
<div class="ace_formatter">; the formatter library turns it into an editor
client-side using the settings attached alongside.
"""

import html
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config import appsettings
from ..models.forms import FormField
from .forms import settingsForm_build
from .store import ConfigStore

FIELD_TYPES = ('text_with_summary', 'text_long')
JS_SETTINGS_KEY = 'ace_formatter'

# (settings key, summary label) for values shown as-is
_SUMMARY_VALUES = (
    ('theme', 'Theme:'),
    ('syntax', 'Syntax:'),
    ('height', 'Height:'),
    ('width', 'Width:'),
    ('font_size', 'Font size:'),
)

# (settings key, summary label) for values shown as On/Off
_SUMMARY_FLAGS = (
    ('line_numbers', 'Show line numbers:'),
    ('print_margins', 'Show print margin:'),
    ('show_invisibles', 'Show invisible characters:'),
    ('use_wrap_mode', 'Toggle word wrapping:'),
)


class AceFormatter:
    """
    Formatter for text_with_summary and text_long fields
    """

    def __init__(self, settings: Optional[Mapping[str, Any]] = None, store: Optional[ConfigStore] = None) -> None:
        """
        Args:
            settings: Saved formatter settings; defaults fill any gaps
            store: Configuration store holding the global defaults
        """
        self.store = store if store is not None else ConfigStore()
        self.settings: Dict[str, Any] = {**self.defaultSettings_get(), **(settings or {})}

    def defaultSettings_get(self) -> Dict[str, Any]:
        """Global editor defaults from configuration storage"""
        return self.store.defaults()

    @staticmethod
    def applicable_is(field_type: str) -> bool:
        return field_type in FIELD_TYPES

    def settingsSummary_get(self) -> List[str]:
        """
        One line per setting for the field display overview

        Example:
            ['Theme: cobalt', 'Syntax: html', ..., 'Show line numbers: On', ...]
        """
        summary = [f"{label} {self.settings.get(key)}" for key, label in _SUMMARY_VALUES]
        summary += [
            f"{label} {'On' if self.settings.get(key) else 'Off'}"
            for key, label in _SUMMARY_FLAGS
        ]
        return summary

    def settingsForm_get(self) -> Dict[str, FormField]:
        return settingsForm_build(self.settings, self.store)

    def elements_view(self, items: Iterable[str]) -> List[Dict[str, Any]]:
        """
        Build one read-only editor element per field item value

        Args:
            items: Field item values

        Returns:
            Element descriptors, one per item, each attaching the formatter
            library and the formatter settings
        """
        elements = []
        for value in items:
            elements.append({
                'type': 'textarea',
                'value': value,
                'attached': {
                    'library': [appsettings.library_qualify(appsettings.formatter_library)],
                    'settings': {JS_SETTINGS_KEY: dict(self.settings)},
                },
                'attributes': {
                    'class': ['content'],
                    'readonly': 'readonly',
                },
                'prefix': '<div class="ace_formatter">',
                'suffix': '</div>',
            })
        return elements


def element_render(element: Mapping[str, Any]) -> str:
    """
    Render a textarea element descriptor to HTML

    Example:
        >>> element_render(AceFormatter().elements_view(['a < b'])[0])
        '<div class="ace_formatter"><textarea class="content" readonly="readonly">a &lt; b</textarea></div>'
    """
    attributes = []
    for name, value in element.get('attributes', {}).items():
        if isinstance(value, (list, tuple)):
            value = ' '.join(value)
        attributes.append(f'{name}="{html.escape(str(value))}"')
    attribute_string = (' ' + ' '.join(attributes)) if attributes else ''

    return (
        f"{element.get('prefix', '')}"
        f"<{element['type']}{attribute_string}>{html.escape(element.get('value') or '', quote=False)}</{element['type']}>"
        f"{element.get('suffix', '')}"
    )
