"""
primitive_types.py
Lookup table from schema primitive names to the types used in generated code.
"""
from schema_model import TargetType

# Legacy pseudo-types that stand for a plain primitive
PRIMITIVE_ALIASES = {
    'uint8_t_mavlink_version': 'uint8_t',
}

CHAR_TYPE = 'char'

PRIMITIVE_TYPES = {
    'double': TargetType('float', 'float64', 0.0),
    'uint64_t': TargetType('int', 'uint64', 0),
    'int64_t': TargetType('int', 'int64', 0),
    'float': TargetType('float', 'float32', 0.0),
    'uint32_t': TargetType('int', 'uint32', 0),
    'int32_t': TargetType('int', 'int32', 0),
    'uint16_t': TargetType('int', 'uint16', 0),
    'int16_t': TargetType('int', 'int16', 0),
    'uint8_t': TargetType('int', 'uint8', 0),
    'int8_t': TargetType('int', 'int8', 0),
    'char': TargetType('str', 'char', ''),
}
