"""
Shared utilities for the dialect code generator.
Handles the mapping of MappedFieldType onto python annotations, defaults and field metadata.
"""
from typing import Any, Dict, List

from schema_model import FieldDef, FieldKind, MappedFieldType

# --- Type Mapping ---
def get_python_type(mapped: MappedFieldType) -> str:
    """Annotation for an attribute holding a mapped field."""
    py_type = mapped.element_type.python_type
    if mapped.kind == FieldKind.FIXED_ARRAY:
        py_type = f'List[{py_type}]'
    return py_type

def get_default_expr(mapped: MappedFieldType) -> str:
    """Keyword argument for dataclasses.field() giving the attribute its zero value."""
    default = repr(mapped.element_type.default)
    if mapped.kind == FieldKind.FIXED_ARRAY:
        return f'default_factory=lambda: [{default}] * {mapped.array_length}'
    return f'default={default}'

def get_field_metadata(field: FieldDef) -> Dict[str, Any]:
    mapped = field.mapped_type
    metadata: Dict[str, Any] = {'type': mapped.element_type.wire_type}
    if mapped.kind == FieldKind.FIXED_ARRAY:
        metadata['length'] = mapped.array_length
    elif mapped.kind == FieldKind.BOUNDED_STRING:
        metadata['max_len'] = mapped.max_length
    if mapped.is_extension:
        metadata['extension'] = True
    if field.enum:
        metadata['enum'] = field.enum
    if field.schema_name != field.name:
        metadata['name'] = field.schema_name
    return metadata

def format_metadata(metadata: Dict[str, Any]) -> str:
    items = ", ".join(f"{key!r}: {value!r}" for key, value in metadata.items())
    return "{" + items + "}"

# --- Comments ---
def comment_lines(text: str, indent: str = "") -> List[str]:
    return [f"{indent}# {line.strip()}".rstrip() for line in (text or "").strip().splitlines()]
