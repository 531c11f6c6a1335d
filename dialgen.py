#!/usr/bin/env python3
"""
dialgen

Generates a python dialect module from a MAVLink style xml definition. The definition and every
definition it includes (recursively) are resolved into one module containing a dataclass per message,
a DIALECT registry of all messages and an IntEnum per enum.

Usage:
    python dialgen.py --output <file.py> [--timeout <seconds>] [--name <name>] [--verbose] <xml>

Arguments:
    xml             : A path or url pointing to a dialect definition in xml format
    --output, -o    : Output file, must end with .py
    --timeout, -t   : Timeout in seconds for downloading remote definitions (default: none)
    --name, -n      : Dialect name written into the module (default: xml file name without extension)
    --verbose, -v   : Enable verbose output for debugging
    --help, -h      : Show this help message

Environment:
    DIALGEN_OUTPUT, DIALGEN_TIMEOUT, DIALGEN_NAME and DIALGEN_VERBOSE override the matching arguments.

Example:
    python dialgen.py --output=dialect.py \\
        https://raw.githubusercontent.com/mavlink/mavlink/master/message_definitions/v1.0/common.xml
"""

import argparse
import os
import sys
from typing import List, Optional

from errors import DialgenError, InvalidOutputPathError
from generators.python_dialect_generator import PythonDialectGenerator, write_dialect_file
from include_resolver import IncludeResolver
from model_transforms.assign_enum_values_transform import AssignEnumValuesTransform
from model_transforms.export_names_transform import ExportNamesTransform
from model_transforms.map_field_types_transform import MapFieldTypesTransform
from schema_fetcher import SchemaFetcher, split_address
from schema_model import SchemaDocument

OUTPUT_EXTENSION = ".py"
TRUE_VALUES = ("1", "true", "yes", "on")


def default_dialect_name(address: str) -> str:
    name = split_address(address)[1]
    if name.endswith(".xml"):
        name = name[:-len(".xml")]
    return name


class DialectGenerator:
    """
    Runs one generation: resolve the definitions reachable from the root address, normalize them
    and write the resulting module.
    """

    def __init__(self, output_file: str, root_address: str, name: Optional[str] = None,
                 timeout: Optional[float] = None, verbose: bool = False):
        """
        Args:
            output_file: Path of the python module to write
            root_address: Path or url of the root xml definition
            name: Dialect name (default: root file name without .xml)
            timeout: Download timeout in seconds for remote definitions
            verbose: Whether to print debug information (default: False)
        """
        self.output_file = output_file
        self.root_address = root_address
        self.name = name or default_dialect_name(root_address)
        self.verbose = verbose
        self.resolver = IncludeResolver(SchemaFetcher(timeout), verbose)
        # Each transform takes the ordered documents and returns them updated
        self.transforms = [
            ExportNamesTransform(),
            MapFieldTypesTransform(),
            AssignEnumValuesTransform(verbose),
        ]
        self.documents: List[SchemaDocument] = []

    def check_output_file(self):
        if not self.output_file.endswith(OUTPUT_EXTENSION):
            raise InvalidOutputPathError(f"output file must end with {OUTPUT_EXTENSION}")

    def resolve_definitions(self) -> List[SchemaDocument]:
        documents = self.resolver.resolve(self.root_address)
        for transform in self.transforms:
            if self.verbose:
                print(f"DEBUG: running {type(transform).__name__} over {len(documents)} documents")
            documents = transform.transform(documents)
        self.documents = documents
        return self.documents

    def generate_output(self) -> str:
        code = PythonDialectGenerator().generate(self.documents, self.name)
        write_dialect_file(code, self.output_file)
        return code

    def run(self):
        self.check_output_file()
        self.resolve_definitions()
        self.generate_output()


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Generate a python dialect module from a definition file.",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('xml', help='A path or url pointing to a dialect definition in xml format')
    parser.add_argument('--output', '-o', required=True, help='Output file, must end with .py')
    parser.add_argument('--timeout', '-t', type=float, default=None,
                        help='Timeout in seconds for downloading remote definitions')
    parser.add_argument('--name', '-n', help='Dialect name (default: xml file name without extension)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output for debugging')

    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    # Override with environment variables if set
    output_file = os.environ.get('DIALGEN_OUTPUT', args.output)
    name = os.environ.get('DIALGEN_NAME', args.name)
    verbose = args.verbose
    if 'DIALGEN_VERBOSE' in os.environ:
        verbose = os.environ['DIALGEN_VERBOSE'].strip().lower() in TRUE_VALUES
    timeout = args.timeout
    if 'DIALGEN_TIMEOUT' in os.environ:
        try:
            timeout = float(os.environ['DIALGEN_TIMEOUT'])
        except ValueError:
            print(f"Error: DIALGEN_TIMEOUT is not a number: '{os.environ['DIALGEN_TIMEOUT']}'", file=sys.stderr)
            sys.exit(1)

    generator = DialectGenerator(output_file, args.xml, name, timeout, verbose)
    try:
        generator.run()
    except DialgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("Dialect generation completed successfully.")


if __name__ == '__main__':
    main()
