"""
Editor instance and render manifest models

Type-safe structures passed between the directive extractor, the filter
and the render scope that collects editor instances for one page.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union

# Attribute values are strings, or 0/1 for the boolean-like literals
AttributeValue = Union[str, int]
AttributeSet = Dict[str, Any]


@dataclass
class DirectiveMatch:
    """
    One <ace>...</ace> region located in (entity-decoded) source text

    Attributes:
        full_match: Exact substring from the opening tag through </ace>,
                    used as the replacement anchor
        opening_tag: The opening tag alone, including any attributes
        inner_content: Text between the tags, trimmed of leading/trailing
                       newlines, carriage returns, NUL and vertical tabs
        position: Offset of full_match in the scanned text

    Example:
        For source '<ace theme="monokai">\\nx = 1\\n</ace>':
        DirectiveMatch(
            full_match='<ace theme="monokai">\\nx = 1\\n</ace>',
            opening_tag='<ace theme="monokai">',
            inner_content='x = 1',
            position=0
        )
    """
    full_match: str
    opening_tag: str
    inner_content: str
    position: int


@dataclass(frozen=True)
class EditorInstance:
    """
    One editor widget placeholder to be initialized client-side

    Attributes:
        id: Element id carried by the placeholder
        content: Code to display in the editor
        settings: Effective settings (base configuration overridden by tag attributes)
    """
    id: str
    content: str
    settings: AttributeSet

    def asDict(self) -> Dict[str, Any]:
        """Shape expected by the front-end script"""
        return {
            'id': self.id,
            'content': self.content,
            'settings': dict(self.settings),
        }


@dataclass
class ManifestDelta:
    """
    Result of a single extractor pass

    Attributes:
        instances: Editor instances in left-to-right source order
        libraries: Qualified library names required by those instances,
                   deduplicated, base library first
    """
    instances: List[EditorInstance] = field(default_factory=list)
    libraries: List[str] = field(default_factory=list)

    def empty_is(self) -> bool:
        return not self.instances


@dataclass
class RenderManifest:
    """
    Page-scoped aggregate of every editor instance found during one render

    Multiple filter invocations within one render append to the same manifest
    rather than replacing it. base_settings is captured once, when the first
    directive of the render is found.
    """
    base_settings: AttributeSet
    instances: List[EditorInstance] = field(default_factory=list)
    attached_libraries: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.base_settings = dict(self.base_settings)

    def libraries_attach(self, names: Iterable[str]) -> None:
        """Add library names, skipping those already attached"""
        for name in names:
            if name not in self.attached_libraries:
                self.attached_libraries.append(name)

    def delta_merge(self, delta: ManifestDelta) -> None:
        """Append the instances and libraries of one extractor pass"""
        self.instances.extend(delta.instances)
        self.libraries_attach(delta.libraries)

    def js_settings(self) -> Dict[str, Any]:
        """
        Structured page data consumed by the front-end script

        Returns:
            {'instances': [{'id', 'content', 'settings'}, ...],
             'theme_settings': {...base settings...}}
        """
        return {
            'instances': [instance.asDict() for instance in self.instances],
            'theme_settings': dict(self.base_settings),
        }


@dataclass
class FilterProcessResult:
    """
    Output of AceFilter.process()

    Attributes:
        text: Filtered text with directives replaced by placeholders
        libraries: Libraries the host should load for this text
        settings: Page settings to expose to the client, keyed by consumer
    """
    text: str
    libraries: List[str] = field(default_factory=list)
    settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def attachments(self) -> Dict[str, Any]:
        """Attachment mapping in the layout host renderers expect"""
        if not self.libraries and not self.settings:
            return {}
        return {
            'library': list(self.libraries),
            'settings': dict(self.settings),
        }
