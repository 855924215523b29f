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

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, runtime_checkable

#===============================================================================

from .terms import NamedNode, NamedOrBlankNode, Term

#===============================================================================

@runtime_checkable
class TripleLike(Protocol):
    """
    The interface of containers that look like
    [RDF triples](https://www.w3.org/TR/rdf11-concepts/#dfn-rdf-triple).

    The ``*_owned()`` methods hand a part over to a caller that takes the
    statement apart, e.g. to rebuild it as a quad. Terms are immutable so the
    part is the same value as the attribute.
    """
    @property
    def subject(self) -> NamedOrBlankNode: ...

    @property
    def predicate(self) -> NamedNode: ...

    @property
    def object(self) -> Term: ...

    def subject_owned(self) -> NamedOrBlankNode: ...

    def predicate_owned(self) -> NamedNode: ...

    def object_owned(self) -> Term: ...

@runtime_checkable
class QuadLike(TripleLike, Protocol):
    """
    The interface of triples that are in an
    [RDF dataset](https://www.w3.org/TR/rdf11-concepts/#dfn-rdf-dataset).

    ``graph_name`` is ``None`` when the triple is in the
    [default graph](https://www.w3.org/TR/rdf11-concepts/#dfn-default-graph).
    """
    @property
    def graph_name(self) -> Optional[NamedOrBlankNode]: ...

    def graph_name_owned(self) -> Optional[NamedOrBlankNode]: ...

#===============================================================================

@dataclass(frozen=True, slots=True)
class Triple:
    """
    An [RDF triple](https://www.w3.org/TR/rdf11-concepts/#dfn-rdf-triple).

    Unpacking a triple gives its parts, ``subject, predicate, object = triple``.
    """
    subject: NamedOrBlankNode
    predicate: NamedNode
    object: Term

    def __iter__(self) -> Iterator[NamedOrBlankNode|NamedNode|Term]:
        yield self.subject
        yield self.predicate
        yield self.object

    def __str__(self) -> str:
        return f'{self.subject} {self.predicate} {self.object} .'

    def subject_owned(self) -> NamedOrBlankNode:
        return self.subject

    def predicate_owned(self) -> NamedNode:
        return self.predicate

    def object_owned(self) -> Term:
        return self.object

    def in_graph(self, graph_name: Optional[NamedOrBlankNode]=None) -> 'Quad':
    #=========================================================================
        return Quad(self.subject, self.predicate, self.object, graph_name)

#===============================================================================

@dataclass(frozen=True, slots=True)
class Quad:
    """
    A [triple](https://www.w3.org/TR/rdf11-concepts/#dfn-rdf-triple) in an
    [RDF dataset](https://www.w3.org/TR/rdf11-concepts/#dfn-rdf-dataset).

    Unpacking a quad gives ``subject, predicate, object, graph_name``.
    """
    subject: NamedOrBlankNode
    predicate: NamedNode
    object: Term
    graph_name: Optional[NamedOrBlankNode] = None

    def __iter__(self) -> Iterator[Optional[NamedOrBlankNode|NamedNode|Term]]:
        yield self.subject
        yield self.predicate
        yield self.object
        yield self.graph_name

    def __str__(self) -> str:
        if self.graph_name is not None:
            return f'{self.subject} {self.predicate} {self.object} {self.graph_name} .'
        return f'{self.subject} {self.predicate} {self.object} .'

    def subject_owned(self) -> NamedOrBlankNode:
        return self.subject

    def predicate_owned(self) -> NamedNode:
        return self.predicate

    def object_owned(self) -> Term:
        return self.object

    def graph_name_owned(self) -> Optional[NamedOrBlankNode]:
        return self.graph_name

    @property
    def in_default_graph(self) -> bool:
        return self.graph_name is None

    @property
    def triple(self) -> Triple:
        return Triple(self.subject, self.predicate, self.object)

#===============================================================================
#===============================================================================
