"""
Settings form shared by the filter, formatter and editor integration.

All three expose the same editable settings; only where the current values
come from differs.
"""

from typing import Any, Dict, Mapping

from ..models.forms import FieldType, FormField
from .store import ConfigStore

SELECT_STYLE = {'style': 'width: 150px;'}
TEXTFIELD_STYLE = {'style': 'width: 100px;'}


def settingsForm_build(settings: Mapping[str, Any], store: ConfigStore) -> Dict[str, FormField]:
    """
    Build form field descriptors for the editor settings.

    Args:
        settings: Current settings, used as each field's default value
        store: Configuration store providing the theme and syntax choices

    Returns:
        Field descriptors keyed by settings key, in display order
    """
    fields = [
        FormField(
            name='theme',
            type=FieldType.SELECT,
            title='Theme',
            options=store.themes_list(),
            attributes=dict(SELECT_STYLE),
        ),
        FormField(
            name='syntax',
            type=FieldType.SELECT,
            title='Syntax',
            description='The syntax that will be highlighted.',
            options=store.syntaxes_list(),
            attributes=dict(SELECT_STYLE),
        ),
        FormField(
            name='height',
            type=FieldType.TEXTFIELD,
            title='Height',
            description='The height of the editor in either pixels or percents.',
            attributes=dict(TEXTFIELD_STYLE),
        ),
        FormField(
            name='width',
            type=FieldType.TEXTFIELD,
            title='Width',
            description='The width of the editor in either pixels or percents.',
            attributes=dict(TEXTFIELD_STYLE),
        ),
        FormField(
            name='font_size',
            type=FieldType.TEXTFIELD,
            title='Font size',
            description='The font size of the editor.',
            attributes=dict(TEXTFIELD_STYLE),
        ),
        FormField(name='line_numbers', type=FieldType.CHECKBOX, title='Show line numbers'),
        FormField(name='print_margins', type=FieldType.CHECKBOX, title='Show print margin (80 chars)'),
        FormField(
            name='show_invisibles',
            type=FieldType.CHECKBOX,
            title='Show invisible characters (whitespaces, EOL...)',
        ),
        FormField(name='use_wrap_mode', type=FieldType.CHECKBOX, title='Toggle word wrapping'),
    ]

    for form_field in fields:
        form_field.default_value = settings.get(form_field.name)

    return {form_field.name: form_field for form_field in fields}
