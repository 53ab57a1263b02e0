"""
AceEditor tests

Tests library resolution with fallbacks and client settings.
"""

import pytest

from ace_editor.lib.editor import AceEditor


@pytest.fixture
def editor():
    return AceEditor()


class TestEditorLibraries:
    """Test libraries_get()"""

    def test_registered_theme_and_mode(self, editor):
        settings = {'fieldset': {'theme': 'monokai', 'syntax': 'php'}}
        assert editor.libraries_get(settings) == [
            'ace_editor/primary',
            'ace_editor/theme.monokai',
            'ace_editor/mode.php',
        ]

    def test_fallback_to_defaults(self, editor):
        """Unregistered names fall back to the global defaults"""
        settings = {'fieldset': {'theme': 'neon', 'syntax': 'klingon'}}
        assert editor.libraries_get(settings) == [
            'ace_editor/primary',
            'ace_editor/theme.cobalt',
            'ace_editor/mode.html',
        ]

    def test_names_trimmed(self, editor):
        settings = {'fieldset': {'theme': ' twilight ', 'syntax': 'python\n'}}
        assert editor.libraries_get(settings)[1:] == [
            'ace_editor/theme.twilight',
            'ace_editor/mode.python',
        ]

    def test_missing_fieldset(self, editor):
        assert editor.libraries_get({}) == [
            'ace_editor/primary',
            'ace_editor/theme.cobalt',
            'ace_editor/mode.html',
        ]


class TestEditorSettings:
    """Test defaults, form and client settings"""

    def test_defaults(self, editor):
        defaults = editor.defaultSettings_get()
        assert defaults['syntax'] == 'html'
        assert 'syntax_list' not in defaults

    def test_form_grouped_in_fieldset(self, editor):
        form = editor.settingsForm_get({'theme': 'chrome'})
        assert list(form) == ['fieldset']
        assert form['fieldset']['theme'].default_value == 'chrome'

    def test_js_settings(self, editor):
        fieldset = {'theme': 'chrome', 'line_numbers': True}
        js = editor.jsSettings_get({'fieldset': fieldset})
        assert js == fieldset
        assert js is not fieldset
