"""
Schema enrichment orchestration for Schema Enricher.

The enricher builds the logical schema and runs the two naming passes over it:

1. column pass: every included table gets a property name, a type decision
   and configuration facets for each of its columns
2. relationship pass: every foreign key gets a forward navigation name on the
   child table and a reverse navigation name on the parent table

The relationship pass compares navigation names against finished column
registries, so it refuses to start until the column pass is complete for all
included tables.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from schema_enricher.config_validation import ToolConfigSchema
from schema_enricher.domain.allocator import UniqueNameAllocator
from schema_enricher.domain.facets import derive_facets
from schema_enricher.domain.models import (
    LogicalSchema,
    LogicalTable,
    NamingPhase,
    RegistryNamespace,
)
from schema_enricher.domain.naming import NamingConventions
from schema_enricher.domain.physical import DatabaseSchema
from schema_enricher.domain.relationships import ForeignKeyPairer
from schema_enricher.domain.type_mapping import TypeMapper
from schema_enricher.exceptions import NamingPhaseError, RelationshipError, TypeMappingError
from schema_enricher.mapper import build_logical_schema

logger = logging.getLogger(__name__)


@dataclass
class EnrichmentContext:
    """
    State of a single enrichment run.

    Everything that used to be process-wide lookup state lives here and is
    passed explicitly to the components; nothing survives the run.
    """

    schema: LogicalSchema
    config: ToolConfigSchema
    conventions: NamingConventions
    allocator: UniqueNameAllocator
    type_mapper: TypeMapper
    pairer: ForeignKeyPairer

    named_relationships: int = 0
    skipped_relationships: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def property_name_for(self, table: LogicalTable, column_name: str) -> str:
        """Unique property name of a column; repeated calls return the same name."""
        return self.allocator.allocate(
            table,
            RegistryNamespace.COLUMNS,
            column_name,
            self.conventions.column_to_property(column_name),
        )


@dataclass
class EnrichmentResult:
    """Outcome of an enrichment run."""

    schema: LogicalSchema
    named_relationships: int = 0
    skipped_relationships: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    unmapped_types: List[str] = field(default_factory=list)
    exhausted_collisions: int = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tables': len(self.schema.tables),
            'included_tables': len(self.schema.included_tables),
            'named_relationships': self.named_relationships,
            'skipped_relationships': self.skipped_relationships,
            'errors': self.errors,
            'unmapped_types': self.unmapped_types,
            'exhausted_collisions': self.exhausted_collisions,
        }


class SchemaEnricher:
    """
    Enriches a physical schema into a logical schema ready for code generation.

    Example:
        >>> enricher = SchemaEnricher(ToolConfigSchema(target_language="csharp"))
        >>> result = enricher.enrich(physical_schema)
        >>> result.schema.tables[0].columns[0].property_name
        'BusinessEntityId'
    """

    def __init__(self, config: Optional[ToolConfigSchema] = None):
        self.config = config or ToolConfigSchema()

    def create_context(self, schema: LogicalSchema) -> EnrichmentContext:
        conventions = NamingConventions(self.config.language)
        allocator = UniqueNameAllocator(self.config.collision_bound)
        return EnrichmentContext(
            schema=schema,
            config=self.config,
            conventions=conventions,
            allocator=allocator,
            type_mapper=TypeMapper(),
            pairer=ForeignKeyPairer(allocator, conventions),
        )

    def enrich(self, physical: DatabaseSchema) -> EnrichmentResult:
        """Build the logical schema and run both naming passes."""
        logger.info(f"Enriching schema with {len(physical.tables)} tables...")
        context = self.create_context(build_logical_schema(physical, self.config))

        self.name_columns(context)
        self.name_relationships(context)

        return EnrichmentResult(
            schema=context.schema,
            named_relationships=context.named_relationships,
            skipped_relationships=context.skipped_relationships,
            errors=context.errors,
            unmapped_types=sorted(context.type_mapper.unmapped_types),
            exhausted_collisions=context.allocator.exhausted_count,
        )

    def name_columns(self, context: EnrichmentContext) -> None:
        """First pass: name and type the columns of every included table."""
        for table in context.schema.included_tables:
            self.name_table_columns(context, table)
        logger.debug("Column naming complete for all tables.")

    def name_table_columns(self, context: EnrichmentContext, table: LogicalTable) -> None:
        if table.phase is not NamingPhase.UNPROCESSED:
            return

        for column in table.columns:
            column.property_name = context.property_name_for(table, column.column_name)
            try:
                column.type_decision = context.type_mapper.resolve(
                    column.physical, table.qualified_name
                )
            except TypeMappingError as e:
                logger.error(f"Type mapping failed: {e.message}")
                context.errors.append(e.message)
            column.facets = derive_facets(column.physical, column.property_name, column.type_decision)

        # Index columns normally name existing columns, which just hits the cache
        for index in table.indexes:
            index.property_names = [
                context.property_name_for(table, column_name) for column_name in index.column_names
            ]

        table.phase = NamingPhase.COLUMNS_NAMED

    def name_relationships(self, context: EnrichmentContext) -> None:
        """
        Second pass: name forward and reverse navigations.

        Raises:
            NamingPhaseError: If some included table has not been through the column pass
        """
        included = context.schema.included_tables
        pending = [table.qualified_name for table in included
                   if table.phase is NamingPhase.UNPROCESSED]
        if pending:
            raise NamingPhaseError(
                "Relationship naming requires column naming to be complete for every table",
                tables=pending,
            )

        for table in included:
            if table.phase is NamingPhase.FULLY_NAMED:
                continue
            for fk in sorted(table.foreign_keys, key=lambda fk: fk.constraint_name):
                try:
                    if context.pairer.pair_and_name(context.schema, table, fk):
                        context.named_relationships += 1
                    else:
                        context.skipped_relationships.append(fk.constraint_name)
                except RelationshipError as e:
                    logger.error(f"Relationship error: {e.message}")
                    context.errors.append(e.message)

        for table in included:
            table.phase = NamingPhase.FULLY_NAMED

        logger.debug(
            f"Relationship naming complete: {context.named_relationships} named, "
            f"{len(context.skipped_relationships)} skipped."
        )


def enrich_schema(physical: DatabaseSchema, config: Optional[ToolConfigSchema] = None) -> EnrichmentResult:
    """Enrich a physical schema with the given (or default) configuration."""
    return SchemaEnricher(config).enrich(physical)
