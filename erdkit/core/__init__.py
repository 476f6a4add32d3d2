"""
ERDKIT Core Components

This module provides functionality shared across the catalog, discover
and model packages:
- Configuration management
- Logging
- Error taxonomy
- Shared enums and models
- Cancellation and background task execution
"""

from .config import Config
from .logger import Logger
from .exceptions import ERDKitError, AccessError, TraversalError, CollectionError
from .models import ObjectType, RelationshipType, CollectionSummary
from .runtime import ProgressMonitor, TaskRunner, TaskResult

__all__ = [
    'Config',
    'Logger',
    'ERDKitError',
    'AccessError',
    'TraversalError',
    'CollectionError',
    'ObjectType',
    'RelationshipType',
    'CollectionSummary',
    'ProgressMonitor',
    'TaskRunner',
    'TaskResult'
]
