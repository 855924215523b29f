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
Data structures for https://www.w3.org/TR/rdf11-concepts/
"""

#===============================================================================

from .factory import DataFactory, IdProvider
from .namespace import Namespace, RDF, XSD
from .statements import Quad, QuadLike, Triple, TripleLike
from .terms import BlankNode, NamedNode, NamedOrBlankNode, Term
from .terms import LanguageTaggedString, Literal, SimpleLiteral, TypedLiteral
from .terms import RDF_LANG_STRING, XSD_STRING
from .terms import as_named_or_blank_node
from .terms import isBlankNode, isLiteral, isNamedNode, isNamedOrBlankNode, isTerm

#===============================================================================
#===============================================================================
