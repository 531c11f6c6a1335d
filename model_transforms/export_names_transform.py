"""
export_names_transform.py
A ModelTransform that renames messages and fields to the names used in generated code.
The xml name stays available as schema_name on every renamed object.
"""
from typing import List
from naming import message_name_to_class, field_name_to_attribute
from schema_model import SchemaDocument

class ExportNamesTransform:
    def __init__(self, keyword_prefix: str = "mav_"):
        self.keyword_prefix = keyword_prefix

    def transform(self, documents: List[SchemaDocument]) -> List[SchemaDocument]:
        for document in documents:
            for msg in document.messages:
                msg.name = message_name_to_class(msg.name)
                for field in msg.fields:
                    field.name = field_name_to_attribute(field.name, self.keyword_prefix)
        return documents
