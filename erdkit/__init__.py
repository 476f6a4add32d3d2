"""
ERDKIT - Entity Relationship Diagram Kit

Collects database catalog objects into entity relationship diagrams:
1. Catalog - read interface over containers, folders and entities
2. Discover - recursive entity collection with name filters and cancellation
3. Model - diagram nodes, relation resolution and the collection orchestrator

Version: 1.0.0
Author: ERDKIT Development Team
"""

__version__ = "1.0.0"
__author__ = "ERDKIT Development Team"
