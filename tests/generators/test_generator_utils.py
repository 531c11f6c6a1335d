from generators.generator_utils import get_python_type, get_default_expr, get_field_metadata, format_metadata, comment_lines
from primitive_types import PRIMITIVE_TYPES
from schema_model import FieldDef, FieldKind, MappedFieldType

def test_python_types_and_defaults():
    scalar = MappedFieldType(FieldKind.SCALAR, PRIMITIVE_TYPES["double"])
    array = MappedFieldType(FieldKind.FIXED_ARRAY, PRIMITIVE_TYPES["uint8_t"], array_length=4)
    string = MappedFieldType(FieldKind.BOUNDED_STRING, PRIMITIVE_TYPES["char"], max_length=16)
    assert get_python_type(scalar) == "float"
    assert get_python_type(array) == "List[int]"
    assert get_python_type(string) == "str"
    assert get_default_expr(scalar) == "default=0.0"
    assert get_default_expr(array) == "default_factory=lambda: [0] * 4"
    assert get_default_expr(string) == "default=''"

def test_field_metadata_order():
    field = FieldDef("param_id", "char[16]", enum="PARAM_TYPE", is_extension=True)
    field.mapped_type = MappedFieldType(FieldKind.BOUNDED_STRING, PRIMITIVE_TYPES["char"], max_length=16, is_extension=True)
    metadata = get_field_metadata(field)
    assert list(metadata) == ["type", "max_len", "extension", "enum"]
    assert format_metadata(metadata) == "{'type': 'char', 'max_len': 16, 'extension': True, 'enum': 'PARAM_TYPE'}"

def test_comment_lines():
    assert comment_lines("  first\n  second  ", "    ") == ["    # first", "    # second"]
    assert comment_lines("") == []
