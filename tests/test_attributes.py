"""
Attribute parsing tests

Tests attribute list location, name normalization and boolean coercion
for <ace> opening tags.
"""

import pytest

from ace_editor.lib.attributes import (
    attributeList_find,
    name_normalize,
    tagAttributes_parse,
    value_coerce,
)


class TestAttributeListFind:
    """Test locating the attribute string of an opening tag"""

    def test_double_quoted(self):
        assert attributeList_find('ace', '<ace theme="monokai">') == 'theme="monokai"'

    def test_multiple_attributes(self):
        tag = '<ace theme="monokai" syntax=\'php\'>'
        assert attributeList_find('ace', tag) == 'theme="monokai" syntax=\'php\''

    def test_self_closing(self):
        assert attributeList_find('ace', '<ace theme="monokai" />') == 'theme="monokai"'

    def test_bare_tag(self):
        """Tag without attributes has no attribute list"""
        assert attributeList_find('ace', '<ace>') is None

    def test_unquoted_values(self):
        """Attribute list must end in a quote to be recognized"""
        assert attributeList_find('ace', '<ace theme=monokai>') is None

    def test_other_element(self):
        assert attributeList_find('ace', '<pre theme="monokai">') is None


class TestValueCoercion:
    """Test the four boolean-like literals"""

    @pytest.mark.parametrize("value,expected", [
        ("1", 1),
        ("0", 0),
        ("TRUE", 1),
        ("FALSE", 0),
    ])
    def test_boolean_literals(self, value, expected):
        result = value_coerce(value)
        assert result == expected
        assert isinstance(result, int)

    @pytest.mark.parametrize("value", ["true", "False", "yes", "10", "", "12pt"])
    def test_other_values_stay_strings(self, value):
        assert value_coerce(value) == value


class TestTagAttributesParse:
    """Test full attribute extraction"""

    def test_simple(self):
        assert tagAttributes_parse('ace', '<ace theme="monokai">x</ace>') == {'theme': 'monokai'}

    def test_hyphen_normalized(self):
        """line-numbers="1" becomes line_numbers: 1"""
        attributes = tagAttributes_parse('ace', '<ace line-numbers="1">')
        assert attributes == {'line_numbers': 1}

    def test_false_literal(self):
        attributes = tagAttributes_parse('ace', '<ace line-numbers="FALSE">')
        assert attributes == {'line_numbers': 0}

    def test_single_quotes(self):
        attributes = tagAttributes_parse('ace', "<ace syntax='python' height='200px'>")
        assert attributes == {'syntax': 'python', 'height': '200px'}

    def test_whitespace_around_equals(self):
        attributes = tagAttributes_parse('ace', '<ace theme = "monokai"  font-size= "14px">')
        assert attributes == {'theme': 'monokai', 'font_size': '14px'}

    def test_names_case_sensitive(self):
        attributes = tagAttributes_parse('ace', '<ace Theme="monokai">')
        assert attributes == {'Theme': 'monokai'}

    def test_value_with_angle_bracket_skipped(self):
        """A value containing '<' is not a valid pair"""
        attributes = tagAttributes_parse('ace', '<ace title="a<b" theme="monokai">')
        assert attributes == {'theme': 'monokai'}

    def test_other_quote_allowed_inside_value(self):
        attributes = tagAttributes_parse('ace', '<ace title="it\'s">')
        assert attributes == {'title': "it's"}

    def test_no_attributes(self):
        """Bare tag gives an empty (not absent) attribute set"""
        assert tagAttributes_parse('ace', '<ace>code</ace>') == {}

    def test_unparseable_attributes(self):
        assert tagAttributes_parse('ace', '<ace theme=monokai>code</ace>') == {}

    def test_later_duplicate_wins(self):
        attributes = tagAttributes_parse('ace', '<ace font-size="10pt" font_size="14pt">')
        assert attributes == {'font_size': '14pt'}

    def test_name_normalize(self):
        assert name_normalize('show-invisibles') == 'show_invisibles'
        assert name_normalize('use_wrap-mode') == 'use_wrap_mode'
