"""
ERDKIT Discover Phase

This module handles entity discovery over catalog hierarchies:
- Recursive traversal of folders and containers
- Navigator name filters
- Cancellation-aware collection
"""

from .entity_collector import EntityCollector, collect_tables

__all__ = [
    'EntityCollector',
    'collect_tables'
]
