"""
naming.py
Converts schema identifiers into the names used in generated code.
"""
import keyword
import re

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def message_name_to_class(name: str) -> str:
    """'ICAROUS_HEARTBEAT' -> 'IcarousHeartbeat'"""
    return "".join(part[:1].upper() + part[1:].lower() for part in name.split("_") if part)


def field_name_to_attribute(name: str, keyword_prefix: str = "mav_") -> str:
    """'numBands' -> 'num_bands'; python keywords get keyword_prefix."""
    attr = _CAMEL_BOUNDARY_RE.sub("_", name).lower()
    if keyword.iskeyword(attr):
        attr = keyword_prefix + attr
    return attr
