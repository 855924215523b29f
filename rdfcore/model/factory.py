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

from threading import Lock
from typing import Any, Optional, Self

#===============================================================================

from .statements import Quad, Triple
from .terms import BlankNode, NamedNode, NamedOrBlankNode, Term
from .terms import LanguageTaggedString, Literal, SimpleLiteral, TypedLiteral

#===============================================================================

class IdProvider:
    """
    Generate blank node ids in a thread safe way.

    The counter starts at zero and is only ever incremented, so the first
    call to ``next()`` returns 1 and no value is returned twice.
    """
    def __init__(self):
        self.__counter = 0
        self.__lock = Lock()

    def __repr__(self):
        with self.__lock:
            return f'IdProvider(counter={self.__counter})'

    def next(self) -> int:
    #=====================
        with self.__lock:
            self.__counter += 1
            return self.__counter

#===============================================================================

def _text(value: Any, role: str) -> str:
#=======================================
    if isinstance(value, str):
        return value
    raise TypeError(f'Expected a string for {role}, got {type(value).__name__}')

def _named_node(value: Any, role: str) -> NamedNode:
#===================================================
    if isinstance(value, NamedNode):
        return value
    elif isinstance(value, str):
        return NamedNode(value)
    raise TypeError(f'Expected an IRI for {role}, got {type(value).__name__}')

def _named_or_blank_node(value: Any, role: str) -> NamedOrBlankNode:
#===================================================================
    if isinstance(value, NamedOrBlankNode):
        return value
    elif isinstance(value, str):
        return NamedNode(value)
    raise TypeError(f'Expected an IRI or blank node for {role}, got {type(value).__name__}')

def _term(value: Any, role: str) -> Term:
#========================================
    if isinstance(value, Term):
        return value
    elif isinstance(value, str):
        return NamedNode(value)
    raise TypeError(f'Expected an RDF term for {role}, got {type(value).__name__}')

#===============================================================================

class DataFactory:
    """
    Create RDF terms and statements.

    Every factory has its own ``IdProvider`` unless one is given. Clones share
    their provider, so blank nodes created by any of them never collide.

    No validation is done: IRIs, language tags and blank node ids are used as
    given. Plain strings are accepted wherever a value converts unambiguously,
    and a string in a node position is taken as an IRI.
    """
    def __init__(self, id_provider: Optional[IdProvider]=None):
        self.__id_provider = id_provider if id_provider is not None else IdProvider()

    def __copy__(self) -> Self:
        return self.clone()

    def __repr__(self):
        return f'DataFactory({self.__id_provider!r})'

    @property
    def id_provider(self) -> IdProvider:
        return self.__id_provider

    def clone(self) -> Self:
    #=======================
        return self.__class__(self.__id_provider)

    def named_node(self, iri: str|NamedNode) -> NamedNode:
    #=====================================================
        return _named_node(iri, 'IRI')

    def blank_node(self, id: str|BlankNode) -> BlankNode:
    #====================================================
        if isinstance(id, BlankNode):
            return id
        return BlankNode(_text(id, 'blank node id'))

    def new_blank_node(self) -> BlankNode:
    #=====================================
        return BlankNode(str(self.__id_provider.next()))

    def simple_literal(self, value: str) -> Literal:
    #===============================================
        return SimpleLiteral(_text(value, 'literal value'))

    def typed_literal(self, value: str, datatype: str|NamedNode) -> Literal:
    #=======================================================================
        return TypedLiteral(_text(value, 'literal value'), _named_node(datatype, 'datatype'))

    def language_tagged_literal(self, value: str, language: str) -> Literal:
    #=======================================================================
        return LanguageTaggedString(_text(value, 'literal value'), _text(language, 'language tag'))

    def triple(self, subject: str|NamedOrBlankNode, predicate: str|NamedNode, object: str|Term) -> Triple:
    #=====================================================================================================
        return Triple(_named_or_blank_node(subject, 'subject'),
                      _named_node(predicate, 'predicate'),
                      _term(object, 'object'))

    def quad(self, subject: str|NamedOrBlankNode, predicate: str|NamedNode, object: str|Term,
             graph_name: Optional[str|NamedOrBlankNode]=None) -> Quad:
    #=================================================================
        return Quad(_named_or_blank_node(subject, 'subject'),
                    _named_node(predicate, 'predicate'),
                    _term(object, 'object'),
                    None if graph_name is None else _named_or_blank_node(graph_name, 'graph name'))

#===============================================================================
#===============================================================================
