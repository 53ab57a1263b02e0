"""
Attribute parsing for directive opening tags

Turns the attribute list of a tag like

    <ace theme="monokai" line-numbers='0' font-size="14px">

into an attribute set:

    {'theme': 'monokai', 'line_numbers': 0, 'font_size': '14px'}

Rules:
- Only name="value" and name='value' pairs are recognized; a value may not
  contain its own quote character or '<'
- Hyphens in names become underscores; names are otherwise kept as written
- The literals "1", "0", "TRUE" and "FALSE" become the integers 1, 0, 1, 0
- A tag without a parseable attribute list yields an empty set, never an error
"""

import re
from typing import Dict, Optional

from ..models.editor import AttributeSet, AttributeValue
from .log import LOG

# Literal attribute values treated as booleans
BOOLEAN_LITERALS: Dict[str, int] = {
    '1': 1,
    '0': 0,
    'TRUE': 1,
    'FALSE': 0,
}

# name = "value" | name = 'value'
_ATTRIBUTE_PAIR_PATTERN = re.compile(
    r'''
        (?P<name> [^\s=]+ )
        \s* = \s*
        (?P<value> '[^<']*' | "[^<"]*" )
    ''',
    flags=re.VERBOSE,
)


def attributeList_find(element_name: str, tag: str) -> Optional[str]:
    """
    Locate the attribute list of an element's opening tag

    The list runs from the first whitespace after the element name up to
    its last quote before the closing '>' or '/>'.

    Args:
        element_name: Tag name (e.g. "ace")
        tag: Markup starting with the opening tag

    Returns:
        Attribute list string, or None if the tag carries no quoted attributes

    Example:
        >>> attributeList_find('ace', '<ace theme="monokai">x</ace>')
        'theme="monokai"'
    """
    match = re.match(
        r'<' + re.escape(element_name) + r'''\s+([^>]+(?:"|'))\s?/?>''',
        tag,
    )
    if not match:
        return None
    return match.group(1)


def value_coerce(value: str) -> AttributeValue:
    """
    Convert boolean-like literals to 0/1, leaving everything else as a string

    Example:
        >>> value_coerce('TRUE'), value_coerce('0'), value_coerce('true')
        (1, 0, 'true')
    """
    return BOOLEAN_LITERALS.get(value, value)


def name_normalize(name: str) -> str:
    """Map attribute names onto settings keys (line-numbers -> line_numbers)"""
    return name.replace('-', '_')


def tagAttributes_parse(element_name: str, tag: str) -> AttributeSet:
    """
    Get all attributes of an element's opening tag as key/value pairs

    Later duplicates of the same (normalized) name override earlier ones.

    Args:
        element_name: Tag name (e.g. "ace")
        tag: Markup starting with the opening tag

    Returns:
        Attribute set; empty if nothing could be extracted

    Example:
        >>> tagAttributes_parse('ace', '<ace syntax="rust" line-numbers="1">fn main() {}</ace>')
        {'syntax': 'rust', 'line_numbers': 1}
    """
    attributes: AttributeSet = {}

    attribute_list = attributeList_find(element_name, tag)
    if attribute_list is None:
        return attributes

    for match in _ATTRIBUTE_PAIR_PATTERN.finditer(attribute_list):
        value = match.group('value')[1:-1]
        attributes[name_normalize(match.group('name'))] = value_coerce(value)

    if not attributes:
        LOG(f"No attributes extracted from: {attribute_list!r}", level=3)

    return attributes
