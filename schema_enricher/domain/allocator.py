"""
Unique identifier allocation for Schema Enricher.

Every identifier generated for a table (column properties, forward
navigations, reverse navigations) must be distinct from the entity class name
and from every other identifier of the same table, ignoring case. Clashes are
resolved by appending an increasing numeric suffix.
"""

import logging

from ..constants import DefaultConfig
from .models import LogicalTable, RegistryNamespace

logger = logging.getLogger(__name__)


class UniqueNameAllocator:
    """
    Allocates per-table unique identifiers and memoizes them.

    The allocation for a given (table, namespace, source key) is computed once;
    later requests for the same key return the cached identifier, so asking
    twice for a column's name always yields the same string within a run.
    """

    def __init__(self, collision_bound: int = DefaultConfig.COLLISION_BOUND):
        if collision_bound < 1:
            raise ValueError(f"collision_bound must be positive, got {collision_bound}")
        self.collision_bound = collision_bound
        self.exhausted_count = 0

    def allocate(
        self,
        table: LogicalTable,
        namespace: RegistryNamespace,
        source_key: str,
        base_name: str
    ) -> str:
        """
        Return a unique identifier for ``source_key`` in the given namespace.

        Args:
            table: Table owning the registries
            namespace: Registry the identifier is recorded in
            source_key: Stable key (column name or constraint name)
            base_name: Candidate identifier before collision resolution

        Returns:
            The identifier recorded for ``source_key``
        """
        registry = table.registry(namespace)
        cached = registry.get(source_key)
        if cached is not None:
            return cached

        attempt = 0
        candidate = base_name
        while table.is_identifier_taken(candidate) and attempt < self.collision_bound:
            attempt += 1
            candidate = f"{base_name}{attempt}"

        if attempt >= self.collision_bound and table.is_identifier_taken(candidate):
            self.exhausted_count += 1
            logger.warning(
                f"Could not find a unique name for '{source_key}' in {table.qualified_name} "
                f"after {self.collision_bound} attempts; keeping '{candidate}'"
            )

        registry.set(source_key, candidate)
        logger.debug(f"{table.qualified_name}: {namespace.value}[{source_key}] = {candidate}")
        return candidate
