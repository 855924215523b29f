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

import pyoxigraph as oxigraph
import pytest

#===============================================================================

from rdfcore import DataFactory, Issue, XSD
from rdfcore.model import BlankNode, LanguageTaggedString, NamedNode, Quad, SimpleLiteral, TypedLiteral
from rdfcore.oxigraph import BlankNodeMapper, from_oxigraph, parse, rdf_format, serialise, to_oxigraph

#===============================================================================

EX = 'http://example.org/'

TURTLE = f"""
@prefix ex: <{EX}> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:s ex:name "hello"@en ;
     ex:count 42 ;
     ex:label "plain" ;
     ex:knows _:a .
_:a ex:knows _:b .
_:b ex:value "7"^^xsd:integer .
"""

TRIG = f"""
@prefix ex: <{EX}> .

ex:s ex:p ex:o .
ex:g {{ ex:s ex:p "in graph" . }}
"""

#===============================================================================

@pytest.mark.parametrize('term', [
    NamedNode(f'{EX}s'),
    BlankNode('b1'),
    SimpleLiteral('hello'),
    LanguageTaggedString('hello', 'en'),
    TypedLiteral('42', XSD.integer),
])
def test_term_round_trip(term):
#==============================
    assert from_oxigraph(to_oxigraph(term), DataFactory()) == term

def test_xsd_string_literal_comes_back_simple():
#===============================================
    literal = TypedLiteral('a', XSD.string)
    assert from_oxigraph(to_oxigraph(literal), DataFactory()) == SimpleLiteral('a')

def test_to_oxigraph_terms():
#============================
    assert to_oxigraph(NamedNode(f'{EX}s')) == oxigraph.NamedNode(f'{EX}s')
    assert to_oxigraph(BlankNode('b1')) == oxigraph.BlankNode('b1')
    assert to_oxigraph(LanguageTaggedString('hi', 'en')) == oxigraph.Literal('hi', language='en')
    assert (to_oxigraph(TypedLiteral('42', XSD.integer))
         == oxigraph.Literal('42', datatype=oxigraph.NamedNode(str(XSD) + 'integer')))

def test_statement_round_trip():
#===============================
    factory = DataFactory()
    triple = factory.triple(f'{EX}s', f'{EX}p', factory.language_tagged_literal('x', 'en'))
    quad = factory.quad(factory.blank_node('b'), f'{EX}p', f'{EX}o', f'{EX}g')
    default = factory.quad(f'{EX}s', f'{EX}p', factory.simple_literal('x'))
    for statement in (triple, quad, default):
        assert from_oxigraph(to_oxigraph(statement), factory) == statement

def test_default_graph():
#========================
    quad = to_oxigraph(DataFactory().quad(f'{EX}s', f'{EX}p', f'{EX}o'))
    assert isinstance(quad.graph_name, oxigraph.DefaultGraph)   # type: ignore

def test_invalid_for_oxigraph():
#===============================
    with pytest.raises(Issue) as issue:
        to_oxigraph(NamedNode('not an IRI'))
    assert isinstance(issue.value.__cause__, ValueError)

def test_quoted_triple_unsupported():
#====================================
    quoted = oxigraph.Triple(oxigraph.NamedNode(f'{EX}s'), oxigraph.NamedNode(f'{EX}p'), oxigraph.NamedNode(f'{EX}o'))
    statement = oxigraph.Triple(oxigraph.NamedNode(f'{EX}s'), oxigraph.NamedNode(f'{EX}p'), quoted)
    with pytest.raises(Issue):
        from_oxigraph(statement, DataFactory())

#===============================================================================

def test_blank_node_mapper():
#============================
    factory = DataFactory()
    mapper = BlankNodeMapper(factory)
    assert mapper('x') == BlankNode('1')
    assert mapper('y') == BlankNode('2')
    assert mapper('x') == BlankNode('1')
    assert len(mapper) == 2
    keeping = BlankNodeMapper(factory, keep_labels=True)
    assert keeping('x') == BlankNode('x')

#===============================================================================

def test_parse_turtle():
#=======================
    factory = DataFactory()
    quads = list(parse(TURTLE, factory))
    assert len(quads) == 6
    assert all(quad.graph_name is None for quad in quads)
    objects = {quad.predicate.value[len(EX):]: quad.object for quad in quads if quad.subject == NamedNode(f'{EX}s')}
    assert objects['name'] == LanguageTaggedString('hello', 'en')
    assert objects['count'] == TypedLiteral('42', XSD.integer)
    assert objects['label'] == SimpleLiteral('plain')
    assert isinstance(objects['knows'], BlankNode)

def test_parse_blank_node_labels():
#==================================
    factory = DataFactory()
    quads = list(parse(TURTLE, factory))
    a = next(quad.object for quad in quads if quad.subject == NamedNode(f'{EX}s')
                                           and quad.predicate == NamedNode(f'{EX}knows'))
    a_statements = [quad for quad in quads if quad.subject == a]
    assert len(a_statements) == 1
    b = a_statements[0].object
    assert isinstance(b, BlankNode) and b != a
    assert [quad.object for quad in quads if quad.subject == b] == [TypedLiteral('7', XSD.integer)]
    assert {a.value, b.value} == {'1', '2'}

def test_parse_keep_labels():
#============================
    quads = list(parse(TURTLE, DataFactory(), keep_labels=True))
    blank_nodes = {quad.subject for quad in quads if isinstance(quad.subject, BlankNode)}
    assert {node.value for node in blank_nodes} == {'a', 'b'}

def test_parse_base_iri():
#=========================
    quads = list(parse('<s> <p> <o> .', DataFactory(), base_iri=EX))
    assert quads == [Quad(NamedNode(f'{EX}s'), NamedNode(f'{EX}p'), NamedNode(f'{EX}o'))]

def test_parse_trig():
#=====================
    quads = list(parse(TRIG, DataFactory(), format=oxigraph.RdfFormat.TRIG))
    assert len(quads) == 2
    assert {quad.graph_name for quad in quads} == {None, NamedNode(f'{EX}g')}

def test_parse_file(tmp_path: Path):
#===================================
    source = tmp_path / 'data.ttl'
    source.write_text(TURTLE)
    assert len(list(parse(source, DataFactory()))) == 6

def test_parse_error():
#======================
    with pytest.raises(Issue):
        list(parse('<s> <p> .', DataFactory(), base_iri=EX))

def test_rdf_format():
#=====================
    assert rdf_format('ttl') == oxigraph.RdfFormat.TURTLE
    assert rdf_format('.nq') == oxigraph.RdfFormat.N_QUADS
    assert rdf_format('application/n-triples') == oxigraph.RdfFormat.N_TRIPLES
    with pytest.raises(Issue):
        rdf_format('xyz')

#===============================================================================

def test_serialise_n_triples():
#==============================
    factory = DataFactory()
    triple = factory.triple(f'{EX}s', f'{EX}p', factory.language_tagged_literal('hello', 'en'))
    quad = triple.in_graph()
    output = serialise([triple, quad], oxigraph.RdfFormat.N_TRIPLES)
    assert output.splitlines() == [f'<{EX}s> <{EX}p> "hello"@en .'] * 2

def test_serialise_named_graph():
#================================
    factory = DataFactory()
    quad = factory.quad(f'{EX}s', f'{EX}p', f'{EX}o', f'{EX}g')
    assert serialise([quad]).strip() == f'<{EX}s> <{EX}p> <{EX}o> <{EX}g> .'
    with pytest.raises(Issue):
        serialise([quad], oxigraph.RdfFormat.TURTLE)

def test_serialise_then_parse():
#===============================
    factory = DataFactory()
    quads = list(parse(TRIG, factory, format=oxigraph.RdfFormat.TRIG))
    assert set(parse(serialise(quads), factory, format=oxigraph.RdfFormat.N_QUADS)) == set(quads)

#===============================================================================
#===============================================================================
