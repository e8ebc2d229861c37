"""
Logical schema models for Schema Enricher.

The logical schema is the physical schema enriched with generated,
collision-free identifiers and resolved type decisions, ready for code
emission. Each table owns three name registries (columns, forward navigations,
reverse navigations) and a naming phase that makes the two-pass lifecycle
explicit:

    UNPROCESSED -> COLUMNS_NAMED -> FULLY_NAMED
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..constants import (
    DeleteActions,
    IndexTypes,
    NULLABLE_MARKER,
    TableTypes,
)
from .physical import Column


class NamingPhase(Enum):
    """How far identifier allocation has progressed for a table."""

    UNPROCESSED = "unprocessed"
    COLUMNS_NAMED = "columns_named"
    FULLY_NAMED = "fully_named"


class RegistryNamespace(Enum):
    """The three identifier namespaces of a table."""

    COLUMNS = "column_names"
    FORWARD_NAVIGATIONS = "forward_fk_names"
    REVERSE_NAVIGATIONS = "reverse_fk_names"


class NameRegistry:
    """
    Mapping from a stable source key (column or constraint name) to an identifier.

    Keys are matched case-insensitively, the way database catalogs compare
    object names. Values keep the casing they were assigned with.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[str, str]] = {}

    def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key.casefold())
        return entry[1] if entry else None

    def set(self, key: str, identifier: str) -> None:
        self._entries[key.casefold()] = (key, identifier)

    def contains_identifier(self, candidate: str) -> bool:
        """Check whether an identifier is already taken, ignoring case."""
        folded = candidate.casefold()
        return any(value.casefold() == folded for _, value in self._entries.values())

    def values(self) -> List[str]:
        return [value for _, value in self._entries.values()]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.items())


@dataclass
class TypeDecision:
    """
    Target-language type resolved for a column.

    ``type_name`` is the short token (``int``, ``string``, ``byte[]``,
    ``DateTime`` or an unmapped vendor type kept verbatim). The nullable marker
    is only carried by value types; reference types are implicitly nullable.
    """

    type_name: str
    is_value_type: bool
    is_nullable: bool
    is_known: bool = True
    verbose_type_name: Optional[str] = None

    @property
    def is_reference_type(self) -> bool:
        return not self.is_value_type

    @property
    def has_nullable_marker(self) -> bool:
        return self.is_nullable and self.is_value_type

    @property
    def type_definition(self) -> str:
        """Type designator as it should appear in the generated code."""
        if self.has_nullable_marker:
            return f"{self.type_name}{NULLABLE_MARKER}"
        return self.type_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type_name': self.type_name,
            'type_definition': self.type_definition,
            'is_value_type': self.is_value_type,
            'is_nullable': self.is_nullable,
            'has_nullable_marker': self.has_nullable_marker,
            'is_known': self.is_known,
            'verbose_type_name': self.verbose_type_name,
        }


@dataclass
class ColumnFacets:
    """Per-column configuration decisions derived from the physical column and its type."""

    is_required: bool = False
    max_length: Optional[int] = None
    is_fixed_length: bool = False
    column_name_override: Optional[str] = None
    default_value_sql: Optional[str] = None
    is_database_generated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_required': self.is_required,
            'max_length': self.max_length,
            'is_fixed_length': self.is_fixed_length,
            'column_name_override': self.column_name_override,
            'default_value_sql': self.default_value_sql,
            'is_database_generated': self.is_database_generated,
        }


@dataclass
class LogicalColumn:
    """A physical column plus the identifier and type chosen for it."""

    physical: Column
    property_name: Optional[str] = None
    type_decision: Optional[TypeDecision] = None
    facets: Optional[ColumnFacets] = None

    @property
    def column_name(self) -> str:
        return self.physical.column_name

    @property
    def is_primary_key_member(self) -> bool:
        return self.physical.is_primary_key_member

    @property
    def ordinal_position(self) -> int:
        return self.physical.ordinal_position

    def to_dict(self) -> Dict[str, Any]:
        return {
            'column_name': self.column_name,
            'property_name': self.property_name,
            'sql_data_type': self.physical.sql_data_type,
            'clr_type': self.physical.clr_type,
            'is_nullable': self.physical.is_nullable,
            'is_primary_key_member': self.is_primary_key_member,
            'type': self.type_decision.to_dict() if self.type_decision else None,
            'facets': self.facets.to_dict() if self.facets else None,
        }


@dataclass
class LogicalForeignKey:
    """
    One side of a foreign key constraint.

    The child table holds the forward entry (navigation to the parent) and the
    parent table holds the reverse entry (navigation to the collection of
    children). Both carry the same ``constraint_name``.
    """

    constraint_name: str
    column_pairs: List[Tuple[str, str]]
    parent_schema: str
    parent_table: str
    child_schema: str
    child_table: str
    delete_action: Optional[str] = None
    navigation_name: Optional[str] = None

    @property
    def first_child_column(self) -> Optional[str]:
        """Child-side column of the first pair; composite keys are named after it alone."""
        return self.column_pairs[0][0] if self.column_pairs else None

    def assign_navigation_name(self, name: str) -> None:
        if self.navigation_name is not None and self.navigation_name != name:
            raise ValueError(
                f"Navigation name of {self.constraint_name} already assigned "
                f"('{self.navigation_name}'), refusing '{name}'"
            )
        self.navigation_name = name

    def client_set_null(self, with_attributes: bool = False) -> bool:
        """Whether deleting the parent should null out the children on the client side."""
        if self.delete_action == DeleteActions.SET_NULL:
            return True
        return with_attributes and self.delete_action == DeleteActions.NO_ACTION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'constraint_name': self.constraint_name,
            'navigation_name': self.navigation_name,
            'parent': f"{self.parent_schema}.{self.parent_table}",
            'child': f"{self.child_schema}.{self.child_table}",
            'columns': [list(pair) for pair in self.column_pairs],
            'delete_action': self.delete_action,
        }


@dataclass
class LogicalIndex:
    """An index, with the identifiers of its columns once they are known."""

    index_name: str
    physical_type: str
    logical_type: str
    column_names: List[str] = field(default_factory=list)
    property_names: List[str] = field(default_factory=list)

    @property
    def is_unique(self) -> bool:
        return self.logical_type in IndexTypes.UNIQUE_LOGICAL

    @property
    def is_configurable(self) -> bool:
        return (
            self.physical_type in IndexTypes.CONFIGURABLE_PHYSICAL
            and self.logical_type != IndexTypes.PRIMARY_KEY
            and bool(self.column_names)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index_name': self.index_name,
            'physical_type': self.physical_type,
            'logical_type': self.logical_type,
            'is_unique': self.is_unique,
            'columns': self.column_names,
            'property_names': self.property_names,
        }


@dataclass
class LogicalTable:
    """
    A table of the logical schema.

    This is the aggregate the enricher works on: it owns the three name
    registries and the naming phase, and exposes the enriched columns and
    navigations to the code emitters.
    """

    schema_name: str
    table_name: str
    class_name: str
    table_type: str = TableTypes.BASE_TABLE
    description: Optional[str] = None
    primary_key_name: Optional[str] = None
    primary_key_is_clustered: bool = False
    is_included: bool = True

    columns: List[LogicalColumn] = field(default_factory=list)
    foreign_keys: List[LogicalForeignKey] = field(default_factory=list)
    child_foreign_keys: List[LogicalForeignKey] = field(default_factory=list)
    indexes: List[LogicalIndex] = field(default_factory=list)

    column_names: NameRegistry = field(default_factory=NameRegistry)
    forward_fk_names: NameRegistry = field(default_factory=NameRegistry)
    reverse_fk_names: NameRegistry = field(default_factory=NameRegistry)

    phase: NamingPhase = NamingPhase.UNPROCESSED

    @property
    def qualified_name(self) -> str:
        if self.schema_name:
            return f"{self.schema_name}.{self.table_name}"
        return self.table_name

    @property
    def is_view(self) -> bool:
        return self.table_type.upper() == TableTypes.VIEW

    def registry(self, namespace: RegistryNamespace) -> NameRegistry:
        return getattr(self, namespace.value)

    def registries(self) -> List[NameRegistry]:
        return [self.column_names, self.forward_fk_names, self.reverse_fk_names]

    def is_identifier_taken(self, candidate: str) -> bool:
        """Check a candidate against the class name and all three registries, ignoring case."""
        if candidate.casefold() == self.class_name.casefold():
            return True
        return any(registry.contains_identifier(candidate) for registry in self.registries())

    def all_identifiers(self) -> List[str]:
        identifiers = [self.class_name]
        for registry in self.registries():
            identifiers.extend(registry.values())
        return identifiers

    def get_column(self, column_name: str) -> Optional[LogicalColumn]:
        folded = column_name.casefold()
        for column in self.columns:
            if column.column_name.casefold() == folded:
                return column
        return None

    def property_name_for(self, column_name: str) -> Optional[str]:
        return self.column_names.get(column_name)

    def columns_in_configuration_order(self) -> List[LogicalColumn]:
        """Primary-key members first in key order, then the other columns alphabetically."""
        return sorted(
            self.columns,
            key=lambda c: (
                0 if c.is_primary_key_member else 1,
                c.ordinal_position if c.is_primary_key_member else 0,
                c.property_name or "",
            ),
        )

    def configurable_indexes(self) -> List[LogicalIndex]:
        """Clustered/non-clustered, non primary-key indexes ordered by their first property."""
        indexes = [index for index in self.indexes if index.is_configurable]
        return sorted(indexes, key=lambda i: i.property_names[0] if i.property_names else "")

    def navigations(self) -> List[LogicalForeignKey]:
        named = [fk for fk in self.foreign_keys if fk.navigation_name is not None]
        return sorted(named, key=lambda fk: fk.navigation_name)

    def reverse_navigations(self) -> List[LogicalForeignKey]:
        named = [fk for fk in self.child_foreign_keys if fk.navigation_name is not None]
        return sorted(named, key=lambda fk: fk.navigation_name)

    def file_name(self, extension: str) -> str:
        return f"{self.class_name}{extension}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'schema_name': self.schema_name,
            'table_name': self.table_name,
            'class_name': self.class_name,
            'table_type': self.table_type,
            'is_included': self.is_included,
            'phase': self.phase.value,
            'columns': [column.to_dict() for column in self.columns],
            'navigations': [fk.to_dict() for fk in self.navigations()],
            'reverse_navigations': [fk.to_dict() for fk in self.reverse_navigations()],
            'indexes': [index.to_dict() for index in self.configurable_indexes()],
            'column_names': self.column_names.to_dict(),
            'forward_fk_names': self.forward_fk_names.to_dict(),
            'reverse_fk_names': self.reverse_fk_names.to_dict(),
        }


@dataclass
class LogicalSchema:
    """Ordered list of logical tables built once per run."""

    tables: List[LogicalTable] = field(default_factory=list)

    def find_table(self, schema_name: str, table_name: str) -> Optional[LogicalTable]:
        for table in self.tables:
            if table.schema_name == schema_name and table.table_name == table_name:
                return table
        return None

    @property
    def included_tables(self) -> List[LogicalTable]:
        return [table for table in self.tables if table.is_included]

    def to_dict(self) -> Dict[str, Any]:
        return {'tables': [table.to_dict() for table in self.tables]}
