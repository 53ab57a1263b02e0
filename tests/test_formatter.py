"""
AceFormatter tests

Tests defaults, the settings summary and read-only editor elements.
"""

from ace_editor.lib.formatter import AceFormatter, element_render


class TestFormatterSettings:
    """Test formatter defaults and summary"""

    def test_defaults_from_store(self):
        formatter = AceFormatter()
        assert formatter.settings['theme'] == 'cobalt'
        assert formatter.settings['font_size'] == '12pt'
        assert 'theme_list' not in formatter.settings

    def test_saved_settings_override(self):
        formatter = AceFormatter(settings={'syntax': 'php'})
        assert formatter.settings['syntax'] == 'php'
        assert formatter.settings['theme'] == 'cobalt'

    def test_summary(self):
        summary = AceFormatter().settingsSummary_get()
        assert summary == [
            'Theme: cobalt',
            'Syntax: html',
            'Height: 500px',
            'Width: 700px',
            'Font size: 12pt',
            'Show line numbers: On',
            'Show print margin: On',
            'Show invisible characters: Off',
            'Toggle word wrapping: On',
        ]

    def test_summary_flags_off(self):
        summary = AceFormatter(settings={'line_numbers': 0}).settingsSummary_get()
        assert 'Show line numbers: Off' in summary

    def test_applicable_field_types(self):
        assert AceFormatter.applicable_is('text_long')
        assert AceFormatter.applicable_is('text_with_summary')
        assert not AceFormatter.applicable_is('string')

    def test_form(self):
        form = AceFormatter(settings={'height': '42px'}).settingsForm_get()
        assert form['height'].default_value == '42px'


class TestFormatterElements:
    """Test elements_view() and element_render()"""

    def test_one_element_per_item(self):
        elements = AceFormatter().elements_view(['a = 1', 'b = 2'])
        assert [e['value'] for e in elements] == ['a = 1', 'b = 2']

    def test_element_shape(self):
        formatter = AceFormatter()
        element = formatter.elements_view(['x'])[0]

        assert element['type'] == 'textarea'
        assert element['attributes'] == {'class': ['content'], 'readonly': 'readonly'}
        assert element['attached']['library'] == ['ace_editor/formatter']
        assert element['attached']['settings'] == {'ace_formatter': formatter.settings}
        assert element['prefix'] == '<div class="ace_formatter">'
        assert element['suffix'] == '</div>'

    def test_no_items(self):
        assert AceFormatter().elements_view([]) == []

    def test_render_escapes_value(self):
        element = AceFormatter().elements_view(['if a < b: print("&")'])[0]
        assert element_render(element) == (
            '<div class="ace_formatter">'
            '<textarea class="content" readonly="readonly">if a &lt; b: print("&amp;")</textarea>'
            '</div>'
        )
