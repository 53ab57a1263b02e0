"""
Directive extractor for inline <ace>...</ace> markup

Replaces every <ace> region of a text with an empty placeholder element and
records, for each one, the code it contained and the editor settings to use,
so a front-end script can later mount an editor on each placeholder.

The extractor runs a single pass:
1. Decode HTML entities (once, before matching)
2. Scan for <ace ...>...</ace> regions, left to right
3. For each region: trim content, parse tag attributes, overlay them on the
   base settings, mint an element id and swap the region for a placeholder
4. Collect theme/mode libraries named by tag attributes, plus the base
   filter library

Example:
    >>> extractor = DirectiveExtractor(LibraryRegistry())
    >>> ids = iter(['ace-1'])
    >>> text, delta = extractor.process(
    ...     '<p>x</p><ace syntax="rust">fn main() {}</ace>',
    ...     {'theme': 'cobalt', 'syntax': 'html'},
    ...     lambda: next(ids),
    ... )
    >>> text
    '<p>x</p><pre id="ace-1"></pre>'
    >>> delta.instances[0].settings
    {'theme': 'cobalt', 'syntax': 'rust'}
"""

import html
import re
from typing import Callable, List, Tuple

from ..config import appsettings, AppSettings
from ..models.editor import AttributeSet, DirectiveMatch, EditorInstance, ManifestDelta
from .attributes import tagAttributes_parse
from .libraries import LibraryRegistry
from .log import LOG

ELEMENT_NAME = 'ace'

# Characters trimmed from both ends of directive content (not general whitespace)
CONTENT_TRIM_CHARACTERS = '\n\r\x00\x0b'

_DIRECTIVE_PATTERN = re.compile(
    r'''
        (?P<opening_tag> <ace (?: \s [^>]* )? > )
        (?P<content> .*? )
        </ace>
    ''',
    flags=re.DOTALL | re.VERBOSE,
)


def content_trim(content: str) -> str:
    r"""
    Trim leading/trailing newlines, carriage returns, NUL and vertical tabs

    Example:
        >>> content_trim("\n\r  print('hi')  \n")
        "  print('hi')  "
    """
    return content.strip(CONTENT_TRIM_CHARACTERS)


def string_replaceOnce(needle: str, replacement: str, haystack: str, start: int = 0) -> Tuple[str, int]:
    """
    Replace the first occurrence of needle at or after start

    Args:
        needle: Exact substring to replace
        replacement: Replacement text
        haystack: Text to search
        start: Offset to begin searching from

    Returns:
        (new text, offset just past the replacement). If needle isn't found
        the text is returned unchanged along with the original start.

    Example:
        >>> string_replaceOnce('ab', 'X', 'ab ab')
        ('X ab', 1)
        >>> string_replaceOnce('ab', 'X', 'X ab', 1)
        ('X X', 3)
    """
    position = haystack.find(needle, start)
    if position == -1:
        return haystack, start
    result = haystack[:position] + replacement + haystack[position + len(needle):]
    return result, position + len(replacement)


class DirectiveExtractor:
    """
    Turns <ace> directives into placeholders plus editor instance records

    The extractor itself is stateless between calls; element ids come from
    the id_source supplied by the caller (normally the active render context),
    and the caller merges the returned delta into its page manifest.
    """

    def __init__(self, libraries: LibraryRegistry, settings: AppSettings = appsettings) -> None:
        """
        Args:
            libraries: Registry consulted before attaching theme/mode bundles
            settings: Application settings (placeholder tag, library names)
        """
        self.libraries = libraries
        self.settings = settings

    def directives_find(self, text: str) -> List[DirectiveMatch]:
        """
        Locate every <ace>...</ace> region in text

        Regions are non-overlapping and returned in order of appearance. An
        opening tag with no closing tag is not a region.

        Example:
            For '<ace>a</ace> <ace x="1">b</ace>':
            [DirectiveMatch(full_match='<ace>a</ace>', opening_tag='<ace>',
                            inner_content='a', position=0),
             DirectiveMatch(full_match='<ace x="1">b</ace>', opening_tag='<ace x="1">',
                            inner_content='b', position=13)]
        """
        return [
            DirectiveMatch(
                full_match=match.group(0),
                opening_tag=match.group('opening_tag'),
                inner_content=content_trim(match.group('content')),
                position=match.start(),
            )
            for match in _DIRECTIVE_PATTERN.finditer(text)
        ]

    def settings_overlay(self, base_settings: AttributeSet, attributes: AttributeSet) -> AttributeSet:
        """Copy base_settings and let tag attributes override it key by key"""
        settings = dict(base_settings)
        settings.update(attributes)
        return settings

    def libraries_forAttributes(self, attributes: AttributeSet) -> List[str]:
        """
        Theme/mode libraries requested by a directive's own attributes

        Only names registered in the library registry are returned; unknown
        or absent theme/syntax attributes contribute nothing.
        """
        libraries: List[str] = []

        theme = attributes.get('theme')
        if theme is not None:
            if self.libraries.theme_exists(theme):
                libraries.append(self.libraries.qualify(self.libraries.theme_name(theme)))
            else:
                LOG(f"No theme library for '{theme}', using front-end default", level=3)

        syntax = attributes.get('syntax')
        if syntax is not None:
            if self.libraries.mode_exists(syntax):
                libraries.append(self.libraries.qualify(self.libraries.mode_name(syntax)))
            else:
                LOG(f"No mode library for '{syntax}', using front-end default", level=3)

        return libraries

    def process(
        self,
        text: str,
        base_settings: AttributeSet,
        id_source: Callable[[], str],
    ) -> Tuple[str, ManifestDelta]:
        """
        Replace each <ace> directive in text with a placeholder

        Args:
            text: Markup possibly containing <ace>...</ace> regions and
                  HTML entities
            base_settings: Default editor settings; never modified
            id_source: Called once per directive for a fresh element id

        Returns:
            (transformed text, delta of instances and libraries). Without
            any directive the original text is returned untouched with an
            empty delta.
        """
        decoded = html.unescape(text)
        matches = self.directives_find(decoded)

        if not matches:
            return text, ManifestDelta()

        LOG(f"Found {len(matches)} <{ELEMENT_NAME}> directive(s)", level=2)

        delta = ManifestDelta()
        libraries: List[str] = [self.settings.library_qualify(self.settings.filter_library)]
        cursor = 0

        for match in matches:
            attributes = tagAttributes_parse(ELEMENT_NAME, match.opening_tag)
            element_id = id_source()

            replaced, next_cursor = string_replaceOnce(
                match.full_match,
                self.settings.placeholder_make(element_id),
                decoded,
                cursor,
            )
            if next_cursor == cursor:
                LOG(f"Directive for {element_id} no longer present, left as found", level=3)
            decoded, cursor = replaced, next_cursor

            for library in self.libraries_forAttributes(attributes):
                if library not in libraries:
                    libraries.append(library)

            delta.instances.append(EditorInstance(
                id=element_id,
                content=match.inner_content,
                settings=self.settings_overlay(base_settings, attributes),
            ))

        delta.libraries = libraries
        return decoded, delta
