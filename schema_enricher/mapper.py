"""
Physical to logical schema mapping for Schema Enricher.

The logical schema is a structural copy of the physical schema: every table,
column, foreign key and index gets its own logical counterpart, so the
enricher can annotate them without touching the loaded physical models.

Example:
    >>> from schema_enricher.mapper import build_logical_schema
    >>> logical = build_logical_schema(physical_schema, config)
"""

import logging
from collections import Counter
from typing import List

from schema_enricher.config_validation import ToolConfigSchema
from schema_enricher.domain.models import (
    LogicalColumn,
    LogicalForeignKey,
    LogicalIndex,
    LogicalSchema,
    LogicalTable,
)
from schema_enricher.domain.naming import generate_class_name
from schema_enricher.domain.physical import DatabaseSchema, ForeignKey, Index, Table

logger = logging.getLogger(__name__)


def find_duplicated_table_names(schema: DatabaseSchema) -> List[str]:
    """Table names that appear in more than one schema."""
    counts = Counter(table.table_name for table in schema.tables)
    return sorted(name for name, count in counts.items() if count > 1)


def map_foreign_key(fk: ForeignKey) -> LogicalForeignKey:
    return LogicalForeignKey(
        constraint_name=fk.foreign_key_constraint_name,
        column_pairs=[(pair.fk_column_name, pair.pk_column_name) for pair in fk.columns],
        parent_schema=fk.pk_table_schema,
        parent_table=fk.pk_table_name,
        child_schema=fk.fk_table_schema,
        child_table=fk.fk_table_name,
        delete_action=fk.on_delete_cascade,
    )


def map_index(index: Index) -> LogicalIndex:
    ordered = sorted(index.columns, key=lambda c: c.index_ordinal_position)
    return LogicalIndex(
        index_name=index.index_name,
        physical_type=index.physical_type,
        logical_type=index.logical_type,
        column_names=[column.column_name for column in ordered if not column.is_included_column],
    )


def map_table(table: Table, config: ToolConfigSchema) -> LogicalTable:
    """Build the logical counterpart of a physical table."""
    return LogicalTable(
        schema_name=table.table_schema,
        table_name=table.table_name,
        class_name=generate_class_name(
            table.table_schema, table.table_name, config.schema_qualified_class_names,
            config.default_schema,
        ),
        table_type=table.table_type,
        description=table.table_description,
        primary_key_name=table.primary_key_name,
        primary_key_is_clustered=table.primary_key_is_clustered,
        is_included=config.is_table_included(table.table_name, table.is_view),
        columns=[LogicalColumn(physical=column) for column in table.columns],
        foreign_keys=[map_foreign_key(fk) for fk in table.foreign_keys],
        child_foreign_keys=[map_foreign_key(fk) for fk in table.child_foreign_keys],
        indexes=[map_index(index) for index in table.indexes],
    )


def build_logical_schema(schema: DatabaseSchema, config: ToolConfigSchema = None) -> LogicalSchema:
    """
    Build the logical schema from the physical schema.

    Tables that share a name across database schemas get the same class name
    unless ``schema_qualified_class_names`` is set; a warning is logged so the
    clash can be resolved in the configuration.

    Args:
        schema: Loaded physical schema
        config: Tool configuration (defaults apply when omitted)

    Returns:
        Logical schema with empty name registries
    """
    if config is None:
        config = ToolConfigSchema()

    duplicated = find_duplicated_table_names(schema)
    if duplicated and not config.schema_qualified_class_names:
        logger.warning(
            f"There are tables with same name in different schemas ({', '.join(duplicated)}), "
            f"their class names will clash; consider enabling schema_qualified_class_names"
        )

    logical = LogicalSchema(
        tables=[map_table(table, config) for table in schema.tables]
    )

    excluded = [table.qualified_name for table in logical.tables if not table.is_included]
    if excluded:
        logger.info(f"Skipping {len(excluded)} excluded tables/views: {', '.join(excluded)}")
    logger.debug(f"Logical schema built with {len(logical.tables)} tables.")
    return logical
