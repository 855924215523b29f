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
RDF terms, see https://www.w3.org/TR/rdf11-concepts/#section-rdf-graph

The three kinds of term are immutable values with structural equality and
hashing. ``Literal``, ``NamedOrBlankNode`` and ``Term`` are closed unions of
the concrete classes, so ``isinstance(term, Term)`` and ``match`` statements
work against them directly.
"""

#===============================================================================

from dataclasses import dataclass
from typing import Any, Optional

#===============================================================================

XSD_STRING_IRI = 'http://www.w3.org/2001/XMLSchema#string'
RDF_LANG_STRING_IRI = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#langString'

#===============================================================================

@dataclass(frozen=True, slots=True)
class NamedNode:
    """An RDF [IRI](https://www.w3.org/TR/rdf11-concepts/#dfn-iri)."""
    iri: str

    def __str__(self) -> str:
        return f'<{self.iri}>'

    @property
    def value(self) -> str:
        return self.iri

#===============================================================================

@dataclass(frozen=True, slots=True)
class BlankNode:
    """An RDF [blank node](https://www.w3.org/TR/rdf11-concepts/#dfn-blank-node)."""
    id: str

    def __str__(self) -> str:
        return f'_:{self.id}'

    @property
    def value(self) -> str:
        return self.id

#===============================================================================

XSD_STRING = NamedNode(XSD_STRING_IRI)
RDF_LANG_STRING = NamedNode(RDF_LANG_STRING_IRI)

#===============================================================================

@dataclass(frozen=True, slots=True)
class SimpleLiteral:
    """A [simple literal](https://www.w3.org/TR/rdf11-concepts/#dfn-simple-literal),
    with the implicit datatype ``xsd:string``."""
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'

    @property
    def language(self) -> Optional[str]:
        return None

    @property
    def datatype(self) -> NamedNode:
        return XSD_STRING

    @property
    def is_plain(self) -> bool:
        return True

@dataclass(frozen=True, slots=True)
class LanguageTaggedString:
    """A [language-tagged string](https://www.w3.org/TR/rdf11-concepts/#dfn-language-tagged-string).

    The datatype of a language-tagged string is always ``rdf:langString``. The
    tag itself is kept as given.
    """
    value: str
    language: str

    def __str__(self) -> str:
        return f'"{self.value}"@{self.language}'

    @property
    def datatype(self) -> NamedNode:
        return RDF_LANG_STRING

    @property
    def is_plain(self) -> bool:
        return True

@dataclass(frozen=True, slots=True)
class TypedLiteral:
    """A literal with an explicit [datatype IRI](https://www.w3.org/TR/rdf11-concepts/#dfn-datatype-iri).

    Any ``NamedNode`` is accepted as the datatype.
    """
    value: str
    datatype: NamedNode

    def __str__(self) -> str:
        return f'"{self.value}"^^{self.datatype}'

    @property
    def language(self) -> Optional[str]:
        return None

    @property
    def is_plain(self) -> bool:
        return False

#===============================================================================

# Closed unions

Literal = SimpleLiteral | LanguageTaggedString | TypedLiteral

NamedOrBlankNode = NamedNode | BlankNode

Term = NamedNode | BlankNode | Literal

#===============================================================================

def isBlankNode(term: Any) -> bool:
    return isinstance(term, BlankNode)

def isLiteral(term: Any) -> bool:
    return isinstance(term, Literal)

def isNamedNode(term: Any) -> bool:
    return isinstance(term, NamedNode)

def isNamedOrBlankNode(term: Any) -> bool:
    return isinstance(term, NamedOrBlankNode)

def isTerm(term: Any) -> bool:
    return isinstance(term, Term)

#===============================================================================

def as_named_or_blank_node(term: Term) -> Optional[NamedOrBlankNode]:
#====================================================================
    match term:
        case NamedNode() | BlankNode():
            return term
        case SimpleLiteral() | LanguageTaggedString() | TypedLiteral():
            return None
    raise TypeError(f'Not an RDF term: {term!r}')

#===============================================================================
#===============================================================================
