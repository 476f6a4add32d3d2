"""
ERDKIT Test Suite

This package contains all test modules for ERDKIT:
- test_config.py / test_logger.py: core configuration and logging
- test_runtime.py: progress monitor and task runner
- test_filters.py / test_memory_catalog.py: catalog access layer
- test_entity_collector.py: recursive entity discovery
- test_erd_entity.py: diagram nodes and relations
- test_diagram_collector.py: collection orchestrator and background adapter
"""

__version__ = "1.0.0"
__author__ = "ERDKIT Team"
