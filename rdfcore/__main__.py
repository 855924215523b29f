#===============================================================================
#
#  RDF core data model
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

from pathlib import Path
import sys

#===============================================================================

from rdfcore import __version__
from rdfcore.model import DataFactory
from rdfcore.oxigraph import parse, rdf_format, serialise
from rdfcore.utils import Issue, configure_logging, log, pretty_log

#===============================================================================

def rdfcat(source: str, format: str|None=None, base_iri: str|None=None,
           keep_labels: bool=False, output_format: str|None=None):
#=================================================================
    source_path = Path(source)
    if not source_path.exists():
        raise IOError(f'Missing RDF source file: {source}')
    input_format = rdf_format(format) if format is not None else None
    statements = parse(source_path, DataFactory(), format=input_format,
                       base_iri=base_iri or source_path.resolve().as_uri(),
                       keep_labels=keep_labels)
    if output_format is None:
        count = 0
        for statement in statements:
            print(statement)
            count += 1
    else:
        quads = list(statements)
        count = len(quads)
        sys.stdout.write(serialise(quads, rdf_format(output_format)))
    log.info(f'{count} statements in {pretty_log(source_path)}')

#===============================================================================

def main():
    import argparse
    parser = argparse.ArgumentParser(description='Print the statements of an RDF file')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--debug', action='store_true', help='Show debugging log messages')
    parser.add_argument('--format', metavar='FORMAT', help='Input format as a file extension or media type (default from SOURCE)')
    parser.add_argument('--base', metavar='IRI', help='Base IRI for resolving relative IRIs (default is SOURCE\'s URI)')
    parser.add_argument('--keep-labels', action='store_true', help='Keep blank node labels of the source')
    parser.add_argument('--output', metavar='FORMAT', help='Serialise in this format instead of printing statements')
    parser.add_argument('source', metavar='SOURCE', help='Input RDF source file')

    args = parser.parse_args()

    configure_logging(debug=args.debug)
    try:
        rdfcat(args.source, format=args.format, base_iri=args.base,
               keep_labels=args.keep_labels, output_format=args.output)
    except Issue as issue:
        sys.exit(str(issue))

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
