"""
schema_model.py
In-memory representation of a parsed dialect definition (messages, fields, enums, includes).
Documents are built by schema_parser, collected by include_resolver and then decorated in place
by the model transforms (exported names, mapped field types, enum values) before code generation.
"""
from enum import Enum
from typing import List, Optional, Any


class FieldKind(Enum):
    SCALAR = "scalar"
    FIXED_ARRAY = "fixed_array"
    BOUNDED_STRING = "bounded_string"


class TargetType:
    """
    A primitive as it appears in generated code.

    python_type is the annotation used for the attribute, wire_type keeps the width information
    of the schema primitive (uint8, float32, ...) and default is the literal used as the
    dataclass default.
    """
    def __init__(self, python_type: str, wire_type: str, default: Any):
        self.python_type = python_type
        self.wire_type = wire_type
        self.default = default

    def __eq__(self, other):
        if not isinstance(other, TargetType):
            return NotImplemented
        return (self.python_type, self.wire_type, self.default) == (other.python_type, other.wire_type, other.default)

    def __repr__(self):
        return f"TargetType(python_type={self.python_type!r}, wire_type={self.wire_type!r})"


class MappedFieldType:
    def __init__(self, kind: FieldKind, element_type: TargetType, array_length: Optional[int] = None,
                 max_length: Optional[int] = None, is_extension: bool = False):
        self.kind = kind
        self.element_type = element_type
        self.array_length = array_length  # FIXED_ARRAY only
        self.max_length = max_length  # BOUNDED_STRING only
        self.is_extension = is_extension

    def __repr__(self):
        return (f"MappedFieldType(kind={self.kind}, element_type={self.element_type!r}, "
                f"array_length={self.array_length}, max_length={self.max_length}, is_extension={self.is_extension})")


class FieldDef:
    def __init__(self, name: str, type: str, enum: Optional[str] = None, description: str = "", is_extension: bool = False):
        self.name = name
        self.schema_name = name  # name as written in the xml, kept after name conversion
        self.type = type  # raw type string, e.g. 'uint8_t', 'float[5]', 'char[20]'
        self.enum = enum
        self.description = description
        self.is_extension = is_extension
        self.mapped_type: Optional[MappedFieldType] = None


class MessageDef:
    def __init__(self, id: int, name: str, description: str = "", fields: Optional[List[FieldDef]] = None):
        self.id = id
        self.name = name
        self.schema_name = name
        self.description = description
        self.fields = fields if fields is not None else []


class EnumEntry:
    def __init__(self, name: str, value: Optional[int], description: str = ""):
        self.name = name
        self.value = value  # None until AssignEnumValuesTransform runs, if the xml omits it
        self.description = description


class EnumDef:
    def __init__(self, name: str, description: str = "", entries: Optional[List[EnumEntry]] = None):
        self.name = name
        self.description = description
        self.entries = entries if entries is not None else []


class SchemaDocument:
    def __init__(
        self,
        address: str,
        name: str,
        version: Optional[int] = None,
        dialect: Optional[int] = None,
        includes: Optional[List[str]] = None,
        enums: Optional[List[EnumDef]] = None,
        messages: Optional[List[MessageDef]] = None,
    ):
        self.address = address
        self.name = name  # final path segment of the address, e.g. 'common.xml'
        self.version = version
        self.dialect = dialect
        self.includes = includes if includes is not None else []
        self.enums = enums if enums is not None else []
        self.messages = messages if messages is not None else []

    def __repr__(self):
        return f"SchemaDocument(address={self.address!r}, messages={len(self.messages)}, enums={len(self.enums)})"
