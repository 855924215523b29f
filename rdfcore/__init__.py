"""

RDF core data model
===================

Terms, triples and quads of https://www.w3.org/TR/rdf11-concepts/ built by a
``DataFactory``:

    factory = DataFactory()
    triple = factory.triple(factory.named_node('http://example.org/s'),
                            factory.named_node('http://example.org/p'),
                            factory.language_tagged_literal('hello', 'en'))

Blank nodes made with ``new_blank_node()`` are numbered by the factory's
``IdProvider``, which is shared by all clones of the factory.

"""

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

from .version import __version__

from .model import DataFactory, IdProvider
from .model import Namespace, RDF, XSD
from .model import Quad, QuadLike, Triple, TripleLike
from .model import BlankNode, NamedNode, NamedOrBlankNode, Term
from .model import LanguageTaggedString, Literal, SimpleLiteral, TypedLiteral
from .model import as_named_or_blank_node
from .model import isBlankNode, isLiteral, isNamedNode, isNamedOrBlankNode, isTerm
from .utils import Issue

#===============================================================================
