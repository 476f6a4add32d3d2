"""
ERDKIT Model Phase Package

This package contains the diagram side of ERDKIT:

Components:
- ERDEntity / ERDAssociation: diagram nodes and relations
- EntityDiagram: persistent node map shared by collection runs
- DiagramObjectCollector: two-phase collection of nodes and relations
- generate_entity_list: background collection that never raises
"""

from .erd_entity import ERDEntity, ERDAssociation, SUPPORTED_OBJECT_TYPES
from .entity_diagram import EntityDiagram
from .diagram_collector import DiagramObjectCollector, generate_entity_list

__all__ = [
    'ERDEntity',
    'ERDAssociation',
    'SUPPORTED_OBJECT_TYPES',
    'EntityDiagram',
    'DiagramObjectCollector',
    'generate_entity_list'
]
