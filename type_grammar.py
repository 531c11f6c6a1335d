from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

from errors import MappingError


# Field type strings: a primitive name with an optional trailing length suffix, e.g. 'uint8_t', 'char[20]'
grammar = r"""
    start: NAME length?
    length: "[" LENGTH "]"

    NAME: /[A-Za-z_][A-Za-z0-9_]*/
    LENGTH: /[0-9]+/
    %import common.WS
    %ignore WS
"""

parser = Lark(
    grammar,
    start='start',
    parser='lalr'
)


class TypeStringTransformer(Transformer):
    @v_args(inline=True)
    def length(self, token):
        return int(token)

    def start(self, items):
        base = str(items[0])
        length = items[1] if len(items) > 1 else None
        return base, length


def parse_type_string(text):
    """Split a raw field type into (base name, length or None)."""
    try:
        tree = parser.parse(text)
    except LarkError as e:
        raise MappingError(f"invalid field type '{text}': {e}") from e
    return TypeStringTransformer().transform(tree)
