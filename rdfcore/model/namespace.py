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

from .terms import NamedNode

#===============================================================================

class Namespace:
    """
    Generate NamedNodes in a namespace, e.g. ``XSD.integer`` or ``RDF('type')``.
    """
    def __init__(self, ns: str):
        self.__ns = ns

    def __str__(self):
        return self.__ns

    def __repr__(self):
        return f'Namespace({self.__ns!r})'

    def __call__(self, name: str='') -> NamedNode:
        return NamedNode(f'{self.__ns}{name}')

    def __getattr__(self, name: str) -> NamedNode:
        if name.startswith('_'):
            raise AttributeError(name)
        return NamedNode(f'{self.__ns}{name}')

    def __contains__(self, node: NamedNode|str) -> bool:
        iri = node if isinstance(node, str) else node.value
        return iri.startswith(self.__ns)

#===============================================================================

RDF = Namespace('http://www.w3.org/1999/02/22-rdf-syntax-ns#')
XSD = Namespace('http://www.w3.org/2001/XMLSchema#')

#===============================================================================
#===============================================================================
