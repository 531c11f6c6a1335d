"""
errors.py
Exception types raised while generating a dialect. Every failure is fatal for the run;
dialgen.main() reports any DialgenError and exits with a non-zero status.
"""


class DialgenError(Exception):
    pass


class InvalidOutputPathError(DialgenError):
    pass


class FetchError(DialgenError):
    def __init__(self, address: str, reason: str):
        super().__init__(f"{address}: {reason}")
        self.address = address
        self.reason = reason


class ParseError(DialgenError):
    def __init__(self, address: str, reason: str):
        location = address or "<input>"
        super().__init__(f"{location}: unable to decode: {reason}")
        self.address = address
        self.reason = reason


class MappingError(DialgenError):
    pass


class EmitError(DialgenError):
    pass


class EnumMergeError(DialgenError):
    pass
