"""
Pytest configuration for ERDKIT test suite.

This module provides shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from erdkit.catalog.memory import load_catalog
from erdkit.core.config import Config
from erdkit.core.runtime import ProgressMonitor
from erdkit.model.entity_diagram import EntityDiagram


@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture
def config(tmp_path):
    """Return a configuration with built-in defaults."""
    return Config(config_file=str(tmp_path / "config.json"))


@pytest.fixture
def monitor():
    """Return a fresh progress monitor."""
    return ProgressMonitor()


@pytest.fixture
def diagram():
    """Return an empty diagram."""
    return EntityDiagram("sales_diagram")


@pytest.fixture
def catalog_definition():
    """Return a warehouse catalog with schemas, folders, views and foreign keys."""
    return {
        "name": "warehouse",
        "filters": {
            "table": {"exclude": ["tmp_%"]}
        },
        "children": [
            {
                "name": "sales",
                "type": "schema",
                "children": [
                    {"name": "customers", "type": "table"},
                    {
                        "name": "orders",
                        "type": "table",
                        "foreign_keys": [
                            {"name": "fk_orders_customer", "references": "sales.customers"},
                            {"name": "fk_orders_product", "references": "inventory.products"}
                        ]
                    },
                    {"name": "order_totals", "type": "view"},
                    {"name": "tmp_staging", "type": "table"},
                    {"name": "audit_log", "type": "table", "hidden": True},
                    {
                        "name": "Archive",
                        "type": "folder",
                        "children": [
                            {
                                "name": "orders_2020",
                                "type": "table",
                                "foreign_keys": [
                                    {"name": "fk_orders_2020_customer", "references": "sales.customers"}
                                ]
                            }
                        ]
                    },
                    {"name": "cust", "type": "synonym"}
                ]
            },
            {
                "name": "inventory",
                "type": "schema",
                "children": [
                    {"name": "products", "type": "table"},
                    {
                        "name": "stock",
                        "type": "table",
                        "children": [
                            {"name": "stock_2023", "type": "partition"},
                            {"name": "stock_2024", "type": "partition"}
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def data_source(catalog_definition):
    """Return the warehouse catalog loaded in memory."""
    return load_catalog(catalog_definition)
