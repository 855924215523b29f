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

"""
Convert between the RDF model and `pyoxigraph`, and use `pyoxigraph`'s
parsers and serialisers to read and write statements of the model.
"""

#===============================================================================

from pathlib import Path
from typing import Iterable, Iterator, Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from .model import DataFactory
from .model import BlankNode, NamedNode, NamedOrBlankNode, Term, Quad, Triple
from .model import LanguageTaggedString, SimpleLiteral, TypedLiteral
from .model import XSD_STRING
from .utils import Issue, log, make_issue

#===============================================================================

OxigraphTerm = oxigraph.NamedNode | oxigraph.BlankNode | oxigraph.Literal
OxigraphStatement = oxigraph.Triple | oxigraph.Quad

RdfFormat = oxigraph.RdfFormat

#===============================================================================

def rdf_format(name: str) -> oxigraph.RdfFormat:
#===============================================
    """
    Find an RDF format from a file extension (``ttl``, ``nq``, ...) or
    a media type (``text/turtle``).
    """
    format = (oxigraph.RdfFormat.from_media_type(name) if '/' in name
         else oxigraph.RdfFormat.from_extension(name.lstrip('.')))
    if format is None:
        raise Issue(f'Unknown RDF format: {name}')
    return format

#===============================================================================

class BlankNodeMapper:
    """
    Map blank node labels of parsed data to blank nodes of the model.

    The same label always maps to the same blank node. With ``keep_labels``
    a parsed label is used as the blank node's id, otherwise every new label
    gets a fresh id from the factory.
    """
    def __init__(self, factory: DataFactory, keep_labels: bool=False):
        self.__factory = factory
        self.__keep_labels = keep_labels
        self.__blank_nodes: dict[str, BlankNode] = {}

    def __call__(self, label: str) -> BlankNode:
        blank_node = self.__blank_nodes.get(label)
        if blank_node is None:
            if self.__keep_labels:
                blank_node = self.__factory.blank_node(label)
            else:
                blank_node = self.__factory.new_blank_node()
            self.__blank_nodes[label] = blank_node
        return blank_node

    def __len__(self) -> int:
        return len(self.__blank_nodes)

#===============================================================================

def to_oxigraph(value: Term|Triple|Quad) -> OxigraphTerm|OxigraphStatement:
#==========================================================================
    try:
        match value:
            case NamedNode():
                return oxigraph.NamedNode(value.value)
            case BlankNode():
                return oxigraph.BlankNode(value.value)
            case SimpleLiteral():
                return oxigraph.Literal(value.value)
            case LanguageTaggedString():
                return oxigraph.Literal(value.value, language=value.language)
            case TypedLiteral():
                return oxigraph.Literal(value.value, datatype=oxigraph.NamedNode(value.datatype.value))
            case Triple():
                return oxigraph.Triple(to_oxigraph(value.subject),      # type: ignore
                                       to_oxigraph(value.predicate),    # type: ignore
                                       to_oxigraph(value.object))       # type: ignore
            case Quad():
                graph_name = (oxigraph.DefaultGraph() if value.graph_name is None
                         else to_oxigraph(value.graph_name))
                return oxigraph.Quad(to_oxigraph(value.subject),        # type: ignore
                                     to_oxigraph(value.predicate),      # type: ignore
                                     to_oxigraph(value.object),         # type: ignore
                                     graph_name)                        # type: ignore
    except ValueError as e:
        # pyoxigraph checks IRIs, blank node ids and language tags
        raise Issue(f'{e}: {value}') from e
    raise TypeError(f'Cannot convert {type(value).__name__} to pyoxigraph')

#===============================================================================

def _named_or_blank_node(node, factory: DataFactory, blank_nodes: BlankNodeMapper) -> NamedOrBlankNode:
#======================================================================================================
    if isinstance(node, oxigraph.NamedNode):
        return factory.named_node(node.value)
    elif isinstance(node, oxigraph.BlankNode):
        return blank_nodes(node.value)
    raise Issue(f'Unsupported subject or graph name: {node}')

def _literal(literal: oxigraph.Literal, factory: DataFactory) -> Term:
#=====================================================================
    if literal.language is not None:
        return factory.language_tagged_literal(literal.value, literal.language)
    elif literal.datatype.value == XSD_STRING.value:
        return factory.simple_literal(literal.value)
    return factory.typed_literal(literal.value, literal.datatype.value)

def from_oxigraph(value: OxigraphTerm|OxigraphStatement, factory: DataFactory,
                  blank_nodes: Optional[BlankNodeMapper]=None) -> Term|Triple|Quad:
#==================================================================================
    """
    Build the model's equivalent of a ``pyoxigraph`` term, triple or quad.

    Simple literals come back as ``SimpleLiteral``, even though
    ``pyoxigraph`` gives them an explicit ``xsd:string`` datatype.
    Quoted triples, variables and other values outside of RDF 1.1 raise an
    ``Issue``.
    """
    if blank_nodes is None:
        blank_nodes = BlankNodeMapper(factory, keep_labels=True)
    if isinstance(value, (oxigraph.NamedNode, oxigraph.BlankNode)):
        return _named_or_blank_node(value, factory, blank_nodes)
    elif isinstance(value, oxigraph.Literal):
        return _literal(value, factory)
    elif isinstance(value, (oxigraph.Triple, oxigraph.Quad)):
        if not isinstance(value.predicate, oxigraph.NamedNode):
            raise Issue(f'Unsupported predicate: {value.predicate}')
        subject = _named_or_blank_node(value.subject, factory, blank_nodes)
        predicate = factory.named_node(value.predicate.value)
        object = value.object
        if isinstance(object, oxigraph.Literal):
            object = _literal(object, factory)
        else:
            object = _named_or_blank_node(object, factory, blank_nodes)
        if isinstance(value, oxigraph.Triple):
            return factory.triple(subject, predicate, object)
        graph_name = value.graph_name
        if isinstance(graph_name, oxigraph.DefaultGraph):
            return factory.quad(subject, predicate, object, None)
        return factory.quad(subject, predicate, object,
                            _named_or_blank_node(graph_name, factory, blank_nodes))
    raise Issue(f'Unsupported RDF value: {value}')

#===============================================================================

def parse(source: str|bytes|Path, factory: DataFactory, format: Optional[oxigraph.RdfFormat]=None,
          base_iri: Optional[str]=None, keep_labels: bool=False) -> Iterator[Quad]:
#==================================================================================
    """
    Parse RDF and yield its statements as quads built by ``factory``.

    ``source`` is either RDF text or the path of an RDF file. The format of a
    file is guessed from its extension when not given, text defaults to Turtle.
    Statements of triple formats are in the default graph.
    """
    blank_nodes = BlankNodeMapper(factory, keep_labels=keep_labels)
    if isinstance(source, Path):
        source_name = str(source)
        kwds = { 'path': source }
    else:
        source_name = '<string>'
        kwds = { 'input': source }
        if format is None:
            format = oxigraph.RdfFormat.TURTLE
    count = 0
    try:
        for quad in oxigraph.parse(format=format, base_iri=base_iri, **kwds):
            yield from_oxigraph(quad, factory, blank_nodes)     # type: ignore
            count += 1
    except (SyntaxError, OSError, ValueError) as e:
        log.error(f'{e}: {source_name}')
        raise make_issue(e)
    log.debug(f'Parsed {count} statements with {len(blank_nodes)} blank nodes from {source_name}')

def serialise(statements: Iterable[Triple|Quad], format: oxigraph.RdfFormat=oxigraph.RdfFormat.N_QUADS) -> str:
#==============================================================================================================
    """
    Write statements with one of ``pyoxigraph``'s serialisers.

    Formats without named graphs only accept triples and quads in the
    default graph.
    """
    converted = []
    for statement in statements:
        if isinstance(statement, Quad) and not format.supports_datasets:
            if statement.graph_name is not None:
                raise Issue(f'{format.name} cannot serialise named graphs: {statement}')
            statement = statement.triple
        elif isinstance(statement, Triple) and format.supports_datasets:
            statement = statement.in_graph()
        converted.append(to_oxigraph(statement))
    try:
        data = oxigraph.serialize(converted, format=format)
    except (OSError, ValueError) as e:
        raise make_issue(e)
    return data.decode('utf-8')     # pyright: ignore[reportOptionalMemberAccess]

#===============================================================================
#===============================================================================
