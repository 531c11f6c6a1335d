"""
Model Transform: AssignEnumValuesTransform
Merges enums that several documents define under the same name and assigns values to enum entries the
xml leaves implicit, so generators do not need to handle merging or value assignment logic.

A dialect may reopen an enum of a document it includes (ardupilotmega.xml adds commands to MAV_CMD).
The first definition in resolution order keeps the enum; entries of later definitions are appended to
it in order and the later definitions are dropped from their documents.
"""
from typing import Dict, List
from errors import EnumMergeError
from schema_model import SchemaDocument, EnumDef

class AssignEnumValuesTransform:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def transform(self, documents: List[SchemaDocument]) -> List[SchemaDocument]:
        merged = self._merge_enums(documents)
        for enum in merged:
            self._assign_enum_values(enum)
        return documents

    def _merge_enums(self, documents: List[SchemaDocument]) -> List[EnumDef]:
        by_name: Dict[str, EnumDef] = {}
        for document in documents:
            kept = []
            for enum in document.enums:
                first = by_name.get(enum.name)
                if first is None:
                    by_name[enum.name] = enum
                    kept.append(enum)
                    continue
                if self.verbose:
                    print(f"DEBUG: enum '{enum.name}' from {document.name} merged into its first definition")
                first.entries.extend(enum.entries)
                if not first.description:
                    first.description = enum.description
            document.enums = kept
        for enum in by_name.values():
            seen = set()
            for entry in enum.entries:
                if entry.name in seen:
                    raise EnumMergeError(f"enum '{enum.name}' defines entry '{entry.name}' more than once")
                seen.add(entry.name)
        return list(by_name.values())

    def _assign_enum_values(self, enum: EnumDef):
        # Auto-increment from the previous entry, restarting after every explicit value
        next_value = 0
        for entry in enum.entries:
            if entry.value is None:
                entry.value = next_value
                if self.verbose:
                    print(f"DEBUG: enum '{enum.name}' entry '{entry.name}' assigned value {entry.value}")
            next_value = entry.value + 1
