"""
ERDKIT Diagram Object Collector

This module turns catalog objects into diagram nodes for the Model phase:
- Phase 1: collect entities and wrap the ones the diagram should show
- Phase 2: resolve relations of the new nodes against the full node map
- generate_entity_list(): background execution with catch-and-log at the boundary
"""

from typing import Dict, Iterable, List, Optional
from datetime import datetime

from ..catalog.base import CatalogObject, is_hidden_object
from ..core.config import Config
from ..core.exceptions import AccessError, CollectionError, TraversalError
from ..core.logger import Logger
from ..core.models import TABLE_TYPES, CollectionSummary
from ..core.runtime import ProgressMonitor, TaskRunner
from ..discover.entity_collector import EntityCollector
from .entity_diagram import EntityDiagram
from .erd_entity import ERDEntity


class DiagramObjectCollector:
    """
    Collects diagram nodes for one run against one diagram.

    The table map is seeded from the diagram and grows with every node built
    by the run. Instances are single-use.
    """

    def __init__(self, diagram: EntityDiagram, config: Optional[Config] = None):
        """Initialize the collector."""
        self.diagram = diagram
        self.config = config or Config()
        self.logger = Logger("diagram_collector", config=self.config)
        self.erd_entities: List[ERDEntity] = []
        self.table_map: Dict[CatalogObject, ERDEntity] = dict(diagram.get_table_map())
        self.summary = CollectionSummary(diagram=diagram.name)
        self._used = False

    def run(self, monitor: ProgressMonitor, roots: Iterable[CatalogObject]) -> List[ERDEntity]:
        """
        Collect entities under the roots and build their diagram nodes.

        Args:
            monitor (ProgressMonitor): Cancellation handle
            roots (Iterable[CatalogObject]): Objects to collect from

        Returns:
            List[ERDEntity]: Nodes created by this run, in discovery order

        Raises:
            CollectionError: If the catalog fails while collecting or resolving relations
        """
        if self._used:
            raise RuntimeError("DiagramObjectCollector instances are single-use")
        self._used = True
        self.summary.started_at = datetime.now()

        roots = list(roots)
        self.summary.roots = [root.name for root in roots]
        show_views = bool(self.config.get("diagram.show_views", True))

        try:
            self.logger.log_phase_start("collect", diagram=self.diagram.name)
            monitor.begin_task("Collect diagram objects")
            tables = EntityCollector(self.logger).collect(monitor, roots)
            self.summary.entities_collected = len(tables)

            # Entities already collected are still wrapped after a cancel
            for table in tables:
                if is_hidden_object(table):
                    self.summary.skipped_hidden += 1
                    continue
                if not show_views and table.object_type in TABLE_TYPES and table.is_view():
                    self.summary.skipped_views += 1
                    continue
                self._add_diagram_entity(monitor, table)
            self.logger.log_phase_complete("collect", diagram=self.diagram.name)

            if not monitor.is_canceled():
                self.logger.log_phase_start("relations", diagram=self.diagram.name)
                for erd_entity in self.erd_entities:
                    if monitor.is_canceled():
                        break
                    self.summary.relations_added += erd_entity.add_relations(monitor, self.table_map, False)
                self.logger.log_phase_complete("relations", diagram=self.diagram.name)
        except TraversalError as e:
            raise CollectionError(f"Could not collect objects for diagram {self.diagram.name}: {e}") from e.__cause__
        except AccessError as e:
            raise CollectionError(f"Could not resolve relations for diagram {self.diagram.name}: {e}") from e
        finally:
            monitor.done()
            self.summary.canceled = monitor.is_canceled()
            self.summary.finished_at = datetime.now()

        self.logger.info(
            f"Collected {self.summary.entities_added} new entities and "
            f"{self.summary.relations_added} relations for diagram {self.diagram.name}"
        )
        return self.erd_entities

    def _add_diagram_entity(self, monitor: ProgressMonitor, table: CatalogObject) -> None:
        if table in self.table_map:
            self.summary.skipped_existing += 1
            return
        erd_entity = ERDEntity.from_object(monitor, self.diagram, table)
        if erd_entity is None:
            self.summary.declined += 1
            return
        self.erd_entities.append(erd_entity)
        self.table_map[table] = erd_entity
        self.summary.entities_added += 1
        monitor.worked()

    def get_diagram_entities(self) -> List[ERDEntity]:
        return self.erd_entities

    def get_table_map(self) -> Dict[CatalogObject, ERDEntity]:
        return self.table_map

    def commit(self) -> int:
        """Publish the nodes of this run into the diagram."""
        return self.diagram.add_entities(self.erd_entities)


def generate_entity_list(diagram: EntityDiagram, objects: Iterable[object],
                         runner: Optional[TaskRunner] = None,
                         monitor: Optional[ProgressMonitor] = None,
                         config: Optional[Config] = None) -> List[ERDEntity]:
    """
    Build diagram nodes for the given objects in a background task.

    Objects that are not catalog objects are ignored. Failures are logged and
    yield an empty list; this function never raises.

    Args:
        diagram (EntityDiagram): Target diagram (not modified)
        objects (Iterable[object]): Candidate root objects
        runner (TaskRunner): Runner to use (a private one is created if omitted)
        monitor (ProgressMonitor): Cancellation handle
        config (Config): Configuration for the run

    Returns:
        List[ERDEntity]: New nodes, possibly partial when canceled
    """
    config = config or Config()
    logger = Logger("diagram_collector", config=config)
    roots = [obj for obj in objects if isinstance(obj, CatalogObject)]

    def work(task_monitor: ProgressMonitor) -> List[ERDEntity]:
        collector = DiagramObjectCollector(diagram, config)
        return collector.run(task_monitor, roots)

    if runner is None:
        with TaskRunner(config=config) as own_runner:
            result = own_runner.run(work, monitor)
    else:
        result = runner.run(work, monitor)

    if not result.ok:
        logger.error(f"Error generating diagram entities for {diagram.name}: {result.error}")
        return []
    if result.canceled:
        logger.info(f"Diagram collection for {diagram.name} was canceled")
    return list(result.value or [])
