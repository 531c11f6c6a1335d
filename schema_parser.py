"""
schema_parser.py
Decodes a MAVLink style xml dialect definition into a SchemaDocument.

The top level (version, dialect, includes, enums) is read attribute by attribute. Message bodies
are walked child by child in document order: every <field> that follows an <extensions/> marker is
an extension field, which no single element carries in its own markup.
"""
import re
import xml.etree.ElementTree as ET
from typing import Optional

from errors import ParseError
from schema_fetcher import split_address
from schema_model import SchemaDocument, MessageDef, FieldDef, EnumDef, EnumEntry

UINT32_MAX = 2 ** 32 - 1
POWER_VALUE_RE = re.compile(r"^\s*(\d+)\s*\*\*\s*(\d+)\s*$")


def parse_schema(content: bytes, address: str = "") -> SchemaDocument:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(address, str(e)) from e

    name = split_address(address)[1] if address else ""
    document = SchemaDocument(address=address, name=name)
    document.version = _parse_optional_int(root.findtext("version"), "version", address)
    document.dialect = _parse_optional_int(root.findtext("dialect"), "dialect", address)
    document.includes = [(inc.text or "").strip() for inc in root.findall("include")]
    document.enums = [_parse_enum(e, address) for e in root.findall("enums/enum")]
    document.messages = [_parse_message(m, address) for m in root.findall("messages/message")]
    return document


def _parse_message(elem: ET.Element, address: str) -> MessageDef:
    raw_id = elem.get("id")
    name = elem.get("name")
    if raw_id is None:
        raise ParseError(address, f"message '{name or '?'}' has no id attribute")
    if name is None:
        raise ParseError(address, f"message with id {raw_id} has no name attribute")
    try:
        msg_id = int(raw_id.strip())
    except ValueError:
        raise ParseError(address, f"message '{name}' has a non-numeric id '{raw_id}'")
    if not 0 <= msg_id <= UINT32_MAX:
        raise ParseError(address, f"message '{name}' id {msg_id} does not fit in 32 bits")

    message = MessageDef(msg_id, name)
    in_extensions = False
    for child in elem:
        if child.tag == "description":
            message.description = _element_text(child)
        elif child.tag == "extensions":
            in_extensions = True
        elif child.tag == "field":
            message.fields.append(_parse_field(child, message, in_extensions, address))
    return message


def _parse_field(elem: ET.Element, message: MessageDef, is_extension: bool, address: str) -> FieldDef:
    field_type = elem.get("type")
    field_name = elem.get("name")
    if field_name is None:
        raise ParseError(address, f"message '{message.name}' has a field without a name attribute")
    if field_type is None:
        raise ParseError(address, f"field '{message.name}.{field_name}' has no type attribute")
    return FieldDef(
        name=field_name,
        type=field_type,
        enum=elem.get("enum"),
        description=_element_text(elem),
        is_extension=is_extension,
    )


def _parse_enum(elem: ET.Element, address: str) -> EnumDef:
    enum_name = elem.get("name")
    if enum_name is None:
        raise ParseError(address, "enum without a name attribute")
    enum = EnumDef(enum_name, _element_text(elem.find("description")))
    for entry in elem.findall("entry"):
        entry_name = entry.get("name")
        if entry_name is None:
            raise ParseError(address, f"enum '{enum_name}' has an entry without a name attribute")
        value = _parse_enum_value(entry.get("value"), f"{enum.name}.{entry_name}", address)
        enum.entries.append(EnumEntry(entry_name, value, _element_text(entry.find("description"))))
    return enum


def _parse_enum_value(raw: Optional[str], what: str, address: str) -> Optional[int]:
    if raw is None:
        return None
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        pass
    match = POWER_VALUE_RE.match(text)
    if match:
        return int(match.group(1)) ** int(match.group(2))
    raise ParseError(address, f"enum entry {what} has an invalid value '{raw}'")


def _parse_optional_int(text: Optional[str], what: str, address: str) -> Optional[int]:
    if text is None or not text.strip():
        return None
    try:
        return int(text.strip())
    except ValueError:
        raise ParseError(address, f"<{what}> is not an integer: '{text.strip()}'")


def _element_text(elem: Optional[ET.Element]) -> str:
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()


def parse_schema_file(path: str) -> SchemaDocument:
    with open(path, "rb") as f:
        return parse_schema(f.read(), path)
