"""
ERDKIT Entity Collector

This module provides recursive entity discovery for the Discover phase:
- Depth-first traversal of folders and containers
- Child name filtering before type dispatch
- Deduplication in first-discovery order
- Cancellation polled on every loop iteration
"""

from typing import Dict, Iterable, List

from ..catalog.base import CatalogObject, STRUCT_ALL
from ..core.exceptions import AccessError, TraversalError
from ..core.logger import Logger
from ..core.runtime import ProgressMonitor


class EntityCollector:
    """
    Entity collector turning root catalog objects into an ordered set of entities.
    """

    def __init__(self, logger: Logger = None):
        """Initialize the entity collector."""
        self.logger = logger or Logger("entity_collector")

    def collect(self, monitor: ProgressMonitor, roots: Iterable[CatalogObject]) -> List[CatalogObject]:
        """
        Collect every entity reachable from the roots.

        Args:
            monitor (ProgressMonitor): Cancellation handle
            roots (Iterable[CatalogObject]): Objects to start from, in order

        Returns:
            List[CatalogObject]: Unique entities in discovery order; partial when canceled

        Raises:
            TraversalError: If the catalog fails to list or cache children
        """
        tables: Dict[CatalogObject, None] = {}
        try:
            self._collect_from_roots(monitor, list(roots), tables)
        except AccessError as e:
            self.logger.error(f"Error collecting entities: {str(e)}")
            raise TraversalError(f"Entity collection failed: {e}") from e

        if monitor.is_canceled():
            self.logger.info(f"Entity collection canceled after {len(tables)} entities")
        else:
            self.logger.debug(f"Collected {len(tables)} entities")
        return list(tables)

    def _collect_from_roots(self, monitor: ProgressMonitor, roots: List[CatalogObject],
                            tables: Dict[CatalogObject, None]) -> None:
        for root in roots:
            if monitor.is_canceled():
                break
            if root.is_folder():
                self._collect_from_roots(monitor, root.get_children_objects(monitor), tables)
            elif root.is_entity():
                tables.setdefault(root, None)
            if root.is_container():
                self._collect_from_container(monitor, root, tables)

    def _collect_from_container(self, monitor: ProgressMonitor, container: CatalogObject,
                                tables: Dict[CatalogObject, None]) -> None:
        if monitor.is_canceled():
            return
        monitor.sub_task(f"Read {container.name}")
        container.cache_structure(monitor, STRUCT_ALL)
        children = container.get_children(monitor)
        if not children:
            return

        object_filter = None
        data_source = container.data_source
        if data_source is not None:
            object_filter = data_source.get_object_filter(container.get_child_type(), container, True)

        for child in children:
            if monitor.is_canceled():
                break
            if object_filter is not None and not object_filter.matches(child.name):
                continue
            if child.is_entity():
                tables.setdefault(child, None)
            elif child.is_container():
                self._collect_from_container(monitor, child, tables)


def collect_tables(monitor: ProgressMonitor, roots: Iterable[CatalogObject]) -> List[CatalogObject]:
    """Collect entities reachable from the roots with a default collector."""
    return EntityCollector().collect(monitor, roots)
