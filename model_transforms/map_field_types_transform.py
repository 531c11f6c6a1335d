"""
map_field_types_transform.py
A ModelTransform that attaches a MappedFieldType to every field of every message.
"""
from typing import Dict, List
from errors import MappingError
from primitive_types import PRIMITIVE_TYPES
from schema_model import SchemaDocument, TargetType
from type_mapper import map_field

class MapFieldTypesTransform:
    def __init__(self, primitive_types: Dict[str, TargetType] = None):
        self.primitive_types = primitive_types if primitive_types is not None else PRIMITIVE_TYPES

    def transform(self, documents: List[SchemaDocument]) -> List[SchemaDocument]:
        for document in documents:
            for msg in document.messages:
                for field in msg.fields:
                    try:
                        field.mapped_type = map_field(field, self.primitive_types)
                    except MappingError as e:
                        raise MappingError(f"{document.address}: {msg.schema_name}.{field.schema_name}: {e}") from e
        return documents
