"""
Configuration and library registry tests

Tests settings file loading, dot-notation lookups, environment-driven
application settings and bundle registration.
"""

import pytest

from ace_editor.config.settings import AppSettings
from ace_editor.lib.libraries import LibraryRegistry
from ace_editor.lib.store import ConfigError, ConfigStore


class TestConfigStore:
    """Test ConfigStore loading and lookups"""

    def test_packaged_defaults(self):
        store = ConfigStore()
        assert store.get('theme') == 'cobalt'
        assert store.get('line_numbers') is True
        assert store.get('show_invisibles') is False

    def test_dot_notation(self):
        store = ConfigStore()
        assert store.get('theme_list.monokai') == 'Monokai'
        assert store.get('theme_list.nope', 'fallback') == 'fallback'
        assert store.get('theme.deeper') is None

    def test_defaults_exclude_catalogs(self):
        defaults = ConfigStore().defaults()
        assert 'theme_list' not in defaults
        assert 'syntax_list' not in defaults
        assert defaults['width'] == '700px'

    def test_custom_file(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("theme: monokai\ntheme_list:\n  monokai: Monokai\n")
        store = ConfigStore(path)
        assert store.get('theme') == 'monokai'
        assert store.themes_list() == {'monokai': 'Monokai'}
        assert store.syntaxes_list() == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("")
        assert ConfigStore(path).config == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigStore(tmp_path / "missing.yml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("theme: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigStore(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            ConfigStore(path)


class TestLibraryRegistry:
    """Test bundle existence checks"""

    def test_base_bundles(self):
        registry = LibraryRegistry()
        assert registry.exists('primary')
        assert registry.exists('filter')
        assert registry.exists('formatter')

    def test_catalog_bundles(self):
        registry = LibraryRegistry()
        assert registry.theme_exists('monokai')
        assert registry.mode_exists('rust')
        assert 'theme.dracula' in registry

    def test_unknown_bundles(self):
        registry = LibraryRegistry()
        assert not registry.theme_exists('neon')
        assert not registry.mode_exists('klingon')
        assert not registry.exists('monokai')

    def test_register(self):
        registry = LibraryRegistry(extra=['mode.house'])
        assert registry.mode_exists('house')
        registry.register('theme.house')
        assert registry.theme_exists('house')

    def test_qualify(self):
        assert LibraryRegistry().qualify('theme.monokai') == 'ace_editor/theme.monokai'

    def test_registry_from_custom_store(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("theme_list:\n  only: Only\nsyntax_list:\n  one: One\n")
        registry = LibraryRegistry(ConfigStore(path))
        assert registry.theme_exists('only')
        assert not registry.theme_exists('monokai')
        assert len(registry) == 5


class TestAppSettings:
    """Test pydantic-settings application configuration"""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.elementId_make('ab', 3) == 'ace-editor-inlineab-3'
        assert settings.placeholder_make('id1') == '<pre id="id1"></pre>'
        assert settings.library_qualify('filter') == 'ace_editor/filter'

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv('ACE_EDITOR_PLACEHOLDER_TAG', 'div')
        monkeypatch.setenv('ACE_EDITOR_LIBRARY_NAMESPACE', 'code')
        settings = AppSettings()
        assert settings.placeholder_make('id1') == '<div id="id1"></div>'
        assert settings.library_qualify('filter') == 'code/filter'

    def test_settings_file_from_environment(self, monkeypatch, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("theme: twilight\n")
        monkeypatch.setenv('ACE_EDITOR_SETTINGS_FILE', str(path))
        assert AppSettings().settings_file == str(path)
