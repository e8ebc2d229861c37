"""
Tests for UniqueNameAllocator
"""

from unittest import TestCase

from schema_enricher.domain.allocator import UniqueNameAllocator
from schema_enricher.domain.models import LogicalTable, RegistryNamespace


def make_table(class_name: str = "Customer") -> LogicalTable:
    return LogicalTable(schema_name="dbo", table_name=class_name, class_name=class_name)


class TestUniqueNameAllocator(TestCase):
    """Test cases for UniqueNameAllocator.allocate"""

    def setUp(self):
        self.allocator = UniqueNameAllocator()

    def test_no_collision_keeps_base_name(self):
        """Test no collision keeps base name"""
        table = make_table()
        name = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Email", "Email")
        self.assertEqual(name, "Email")
        self.assertEqual(table.column_names.get("Email"), "Email")

    def test_repeated_request_returns_cached_name(self):
        """Test repeated request returns cached name"""
        table = make_table("Class")
        first = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Class", "Class")
        second = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Class", "Class")
        self.assertEqual(first, "Class1")
        self.assertEqual(first, second)
        self.assertEqual(len(table.column_names), 1)

    def test_source_keys_are_case_insensitive(self):
        """Test source keys are case insensitive"""
        table = make_table()
        first = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "OrderDate", "OrderDate")
        second = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "ORDERDATE", "Orderdate")
        self.assertEqual(first, second)

    def test_collision_with_class_name(self):
        """Test collision with class name"""
        table = make_table("Class")
        name = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "class", "Class")
        assert name == "Class1"

    def test_collision_check_ignores_case(self):
        """Test collision check ignores case"""
        table = make_table()
        self.allocator.allocate(table, RegistryNamespace.COLUMNS, "name", "Name")
        name = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "NAME_", "NAME")
        self.assertEqual(name, "NAME1")

    def test_suffix_increments_until_free(self):
        """Test suffix increments until free"""
        table = make_table()
        self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Code", "Code")
        self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Code1", "Code1")
        name = self.allocator.allocate(table, RegistryNamespace.COLUMNS, "code_", "Code")
        self.assertEqual(name, "Code2")

    def test_collisions_span_all_registries(self):
        """Test collisions span all registries"""
        table = make_table("AddressType")
        self.allocator.allocate(table, RegistryNamespace.COLUMNS, "Person", "Person")
        forward = self.allocator.allocate(
            table, RegistryNamespace.FORWARD_NAVIGATIONS, "FK_A", "Person"
        )
        reverse = self.allocator.allocate(
            table, RegistryNamespace.REVERSE_NAVIGATIONS, "FK_B", "Person"
        )
        self.assertEqual(forward, "Person1")
        self.assertEqual(reverse, "Person2")
        self.assertEqual(table.reverse_fk_names.get("FK_B"), "Person2")
        self.assertIsNone(table.forward_fk_names.get("FK_B"))

    def test_bound_exhausted_keeps_last_candidate_and_warns(self):
        """Test bound exhausted keeps last candidate and warns"""
        allocator = UniqueNameAllocator(collision_bound=1)
        table = make_table("Foo")
        self.assertEqual(allocator.allocate(table, RegistryNamespace.COLUMNS, "Foo", "Foo"), "Foo1")

        with self.assertLogs("schema_enricher.domain.allocator", level="WARNING") as logs:
            name = allocator.allocate(table, RegistryNamespace.COLUMNS, "foo_", "Foo")

        self.assertEqual(name, "Foo1")
        self.assertEqual(allocator.exhausted_count, 1)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("after 1 attempts", logs.output[0])

    def test_invalid_bound_rejected(self):
        """Test invalid bound rejected"""
        with self.assertRaises(ValueError):
            UniqueNameAllocator(collision_bound=0)
