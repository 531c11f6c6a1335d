"""
Python dialect generator.
Renders the ordered list of resolved SchemaDocuments into a single python module: one dataclass per
message with a get_id() accessor, a DIALECT registry listing every message class in resolution order,
and one IntEnum per enum.
"""
import os
from typing import List

from errors import EmitError
from generators.generator_utils import (
    get_python_type, get_default_expr, get_field_metadata, format_metadata, comment_lines
)
from schema_model import SchemaDocument, MessageDef, EnumDef

HEADER = "# autogenerated with dialgen. do not edit."
INDENT = "    "


def message_class_name(msg: MessageDef) -> str:
    return f"Message{msg.name}"


class PythonDialectGenerator:
    def generate(self, documents: List[SchemaDocument], dialect_name: str) -> str:
        lines = [
            HEADER,
            repr(f"Message definitions of the {dialect_name} dialect."),
            "from __future__ import annotations",
            "",
            "from dataclasses import dataclass, field as _field",
            "from enum import IntEnum",
            "from typing import List",
            "",
            f"DIALECT_NAME = {dialect_name!r}",
            "",
        ]

        for document in documents:
            lines.append(f"# {document.name}")
            lines.append("")
            for msg in document.messages:
                lines.extend(self._emit_message(msg, document))

        lines.append("")
        lines.append("DIALECT = [")
        for document in documents:
            lines.append(f"{INDENT}# {document.name}")
            for msg in document.messages:
                lines.append(f"{INDENT}{message_class_name(msg)},")
        lines.append("]")

        for document in documents:
            for enum in document.enums:
                lines.append("")
                lines.extend(self._emit_enum(enum))

        return "\n".join(lines) + "\n"

    def _emit_message(self, msg: MessageDef, document: SchemaDocument) -> List[str]:
        lines = []
        lines.append("@dataclass")
        lines.append(f"class {message_class_name(msg)}:")
        lines.extend(comment_lines(msg.description, INDENT))
        attributes = {}
        for f in msg.fields:
            if f.mapped_type is None:
                raise EmitError(f"{document.name}: field '{msg.schema_name}.{f.schema_name}' has no mapped type")
            if f.name in attributes:
                raise EmitError(f"{document.name}: message '{msg.schema_name}' fields '{attributes[f.name]}' and "
                                f"'{f.schema_name}' both map to attribute '{f.name}'")
            attributes[f.name] = f.schema_name
            lines.extend(comment_lines(f.description, INDENT))
            metadata = format_metadata(get_field_metadata(f))
            lines.append(f"{INDENT}{f.name}: {get_python_type(f.mapped_type)} = "
                         f"_field({get_default_expr(f.mapped_type)}, metadata={metadata})")
        if msg.fields:
            lines.append("")
        lines.append(f"{INDENT}@staticmethod")
        lines.append(f"{INDENT}def get_id() -> int:")
        lines.append(f"{INDENT}{INDENT}return {msg.id}")
        lines.append("")
        lines.append("")
        return lines

    def _emit_enum(self, enum: EnumDef) -> List[str]:
        lines = []
        lines.append("")
        lines.append(f"class {enum.name}(IntEnum):")
        lines.extend(comment_lines(enum.description, INDENT))
        for entry in enum.entries:
            if entry.value is None:
                raise EmitError(f"enum entry '{enum.name}.{entry.name}' has no value")
            lines.extend(comment_lines(entry.description, INDENT))
            lines.append(f"{INDENT}{entry.name} = {entry.value}")
        if not enum.entries:
            lines.append(f"{INDENT}pass")
        return lines


def write_dialect_file(code: str, out_path: str):
    out_dir = os.path.dirname(out_path)
    try:
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(code)
    except OSError as e:
        raise EmitError(f"unable to write {out_path}: {e}") from e
