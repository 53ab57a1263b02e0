"""
Settings form models

Form field descriptors handed to the host's form renderer. Rendering
itself happens elsewhere; these only describe what to render.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class FieldType(Enum):
    """Widget kinds understood by the host form renderer"""
    SELECT = "select"
    TEXTFIELD = "textfield"
    CHECKBOX = "checkbox"


@dataclass
class FormField:
    """
    Descriptor for one settings form field

    Attributes:
        name: Settings key the field edits
        type: Widget kind
        title: Field label
        default_value: Current value of the setting
        description: Optional help text
        options: Choices for select fields (key -> label)
        attributes: Extra HTML attributes (e.g. inline style)
    """
    name: str
    type: FieldType
    title: str
    default_value: Any = None
    description: Optional[str] = None
    options: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, str] = field(default_factory=dict)
