"""
type_mapper.py
Maps a field's raw schema type string onto a MappedFieldType.

'char[N]' is a bounded string of at most N characters, any other 'T[N]' is a fixed array of N
elements of T, and a bare name is a scalar. The length suffix is split off before the table lookup
because the primitive table only knows base names.
"""
from typing import Dict

from errors import MappingError
from primitive_types import PRIMITIVE_TYPES, PRIMITIVE_ALIASES, CHAR_TYPE
from schema_model import FieldDef, FieldKind, MappedFieldType, TargetType
from type_grammar import parse_type_string


def map_field(field: FieldDef, primitive_types: Dict[str, TargetType] = PRIMITIVE_TYPES) -> MappedFieldType:
    raw_type = PRIMITIVE_ALIASES.get(field.type, field.type)
    base, length = parse_type_string(raw_type)

    if length is not None and base == CHAR_TYPE:
        kind = FieldKind.BOUNDED_STRING
    elif length is not None:
        kind = FieldKind.FIXED_ARRAY
    else:
        kind = FieldKind.SCALAR

    element_type = primitive_types.get(base)
    if element_type is None:
        raise MappingError(f"unknown field type '{base}' (in '{field.type}')")

    return MappedFieldType(
        kind=kind,
        element_type=element_type,
        array_length=length if kind == FieldKind.FIXED_ARRAY else None,
        max_length=length if kind == FieldKind.BOUNDED_STRING else None,
        is_extension=field.is_extension,
    )
