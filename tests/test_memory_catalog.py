"""
Tests for the ERDKIT in-memory catalog.
"""

import json
import pytest
from unittest.mock import PropertyMock, patch

from erdkit.catalog.base import Capability, is_hidden_object
from erdkit.catalog.memory import (
    MemoryContainer, MemoryDataSource, MemoryFolder, MemoryTable, load_catalog
)
from erdkit.catalog.filters import ObjectFilter
from erdkit.core.exceptions import AccessError
from erdkit.core.models import ObjectType


class TestLoadCatalog:
    """Test cases for load_catalog."""

    def test_load_from_dict(self, data_source):
        """Test building objects from a catalog dictionary."""
        assert isinstance(data_source, MemoryDataSource)
        assert data_source.name == "warehouse"
        assert [child.name for child in data_source.children] == ["sales", "inventory"]
        assert data_source.filters[ObjectType.TABLE].exclude == ["tmp_%"]

    def test_load_from_json_file(self, tmp_path, catalog_definition):
        """Test loading a catalog from a JSON file."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_definition))

        source = load_catalog(str(path))

        assert source.find_object("inventory.stock.stock_2024") is not None

    def test_missing_file(self, tmp_path):
        """Test that unreadable files raise AccessError."""
        with pytest.raises(AccessError):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_definition(self):
        """Test that invalid definitions raise AccessError."""
        with pytest.raises(AccessError):
            load_catalog({"name": "db", "children": [{"name": "x", "type": "index"}]})

    def test_object_kinds(self, data_source):
        """Test the object classes and flags built for each kind."""
        sales = data_source.find_object("sales")
        view = data_source.find_object("sales.order_totals")
        archive = data_source.find_object("sales.Archive")
        stock = data_source.find_object("inventory.stock")
        partition = data_source.find_object("inventory.stock.stock_2023")

        assert isinstance(sales, MemoryContainer)
        assert sales.get_child_type() == ObjectType.TABLE
        assert isinstance(view, MemoryTable) and view.is_view()
        assert view.object_type == ObjectType.TABLE
        assert isinstance(archive, MemoryFolder)
        assert archive.capabilities == frozenset({Capability.FOLDER, Capability.CONTAINER})
        assert stock.capabilities == frozenset({Capability.ENTITY, Capability.CONTAINER})
        assert partition.object_type == ObjectType.PARTITION
        assert partition.capabilities == frozenset({Capability.ENTITY})

    def test_hidden_flag(self, data_source):
        """Test hidden objects."""
        assert is_hidden_object(data_source.find_object("sales.audit_log"))
        assert not is_hidden_object(data_source.find_object("sales.orders"))

    def test_explicit_child_type(self):
        """Test that a declared child type overrides inference."""
        source = load_catalog({
            "name": "db",
            "children": [{"name": "main", "type": "catalog", "child_type": "schema"}]
        })
        assert source.find_object("main").get_child_type() == ObjectType.SCHEMA

    def test_child_type_skips_leading_folders(self):
        """Test child type inference when folders come before typed children."""
        source = load_catalog({
            "name": "db",
            "children": [
                {"name": "Shared", "type": "folder"},
                {"name": "public", "type": "schema", "children": [
                    {"name": "Archive", "type": "folder"},
                    {"name": "orders", "type": "table"}
                ]},
                {"name": "empty", "type": "schema", "children": [{"name": "Old", "type": "folder"}]}
            ]
        })

        assert source.get_child_type() == ObjectType.SCHEMA
        assert source.find_object("public").get_child_type() == ObjectType.TABLE
        assert source.find_object("empty").get_child_type() == ObjectType.TABLE


class TestMemoryDataSource:
    """Test cases for MemoryDataSource."""

    def test_associations_resolve_by_qualified_name(self, data_source, monitor):
        """Test foreign key resolution."""
        orders = data_source.find_object("sales.orders")

        associations = orders.get_associations(monitor)

        assert [a.name for a in associations] == ["fk_orders_customer", "fk_orders_product"]
        assert associations[0].referenced_entity is data_source.find_object("sales.customers")
        assert associations[1].referenced_entity is data_source.find_object("inventory.products")

    def test_container_filter_overrides_data_source_filter(self):
        """Test filter lookup order."""
        source = MemoryDataSource("db")
        source.filters = {ObjectType.TABLE: ObjectFilter(exclude=["tmp_%"])}
        schema = source.add_child(MemoryContainer("staging"))
        schema.filters = {ObjectType.TABLE: ObjectFilter(include=["tmp_%"])}
        other = source.add_child(MemoryContainer("public"))

        assert source.get_object_filter(ObjectType.TABLE, schema, True).include == ["tmp_%"]
        assert source.get_object_filter(ObjectType.TABLE, other, True).exclude == ["tmp_%"]
        assert source.get_object_filter(ObjectType.SCHEMA, other, True) is None

    def test_access_log(self, data_source, monitor):
        """Test that listing calls are recorded and can be cleared."""
        data_source.find_object("sales").get_children(monitor)
        assert data_source.access_log == [("get_children", "sales")]

        data_source.clear_access_log()
        assert data_source.access_log == []

    def test_data_source_and_qualified_name(self, data_source):
        """Test parent chain navigation."""
        orders_2020 = data_source.find_object("sales.Archive.orders_2020")
        assert orders_2020.data_source is data_source
        assert orders_2020.qualified_name == "sales.Archive.orders_2020"

    def test_capability_checks(self, data_source):
        """Test that the kind checks follow the declared capabilities."""
        stock = data_source.find_object("inventory.stock")
        archive = data_source.find_object("sales.Archive")

        assert stock.has_capability(Capability.ENTITY)
        assert stock.is_entity() and stock.is_container() and not stock.is_folder()
        assert archive.is_folder() and archive.is_container() and not archive.is_entity()

        with patch.object(MemoryTable, "capabilities", new_callable=PropertyMock,
                          return_value=frozenset({Capability.FOLDER})):
            assert stock.is_folder()
            assert not stock.is_entity()

    def test_unsupported_operation(self, data_source, monitor):
        """Test that operations outside an object's capabilities raise NotImplementedError."""
        with pytest.raises(NotImplementedError):
            data_source.find_object("sales").get_associations(monitor)


if __name__ == "__main__":
    pytest.main([__file__])
