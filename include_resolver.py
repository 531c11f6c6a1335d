"""
include_resolver.py
Loads a root dialect definition and every definition it transitively includes.

Each call to resolve() owns its own processed-address set and output list, so a resolver can be
reused. Documents come out in post-order: every include is fully resolved and appended before the
document that includes it. Addresses are compared as plain strings.
"""
from typing import List, Optional

from schema_fetcher import SchemaFetcher, is_remote_address, split_address
from schema_model import SchemaDocument
from schema_parser import parse_schema


class IncludeResolver:
    def __init__(self, fetcher: Optional[SchemaFetcher] = None, verbose: bool = False):
        self.fetcher = fetcher if fetcher is not None else SchemaFetcher()
        self.verbose = verbose

    def debug_print(self, message: str) -> None:
        if self.verbose:
            print(message)

    def resolve(self, root_address: str) -> List[SchemaDocument]:
        remote = is_remote_address(root_address)
        processed = set()
        documents: List[SchemaDocument] = []

        def visit(address: str):
            if address in processed:
                self.debug_print(f"DEBUG: skipping already processed '{address}'")
                return
            processed.add(address)

            print(f"parsing {address}...")
            content = self.fetcher.fetch(address, remote)
            document = parse_schema(content, address)
            self.debug_print(f"DEBUG: '{address}' declares {len(document.messages)} messages, "
                             f"{len(document.enums)} enums, includes {document.includes}")

            parent_prefix = split_address(address)[0]
            for include in document.includes:
                # remote includes are relative to the including document, local ones to the cwd
                child = parent_prefix + include if remote else include
                visit(child)

            documents.append(document)

        visit(root_address)
        return documents
