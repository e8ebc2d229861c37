"""
Relationship naming domain logic for Schema Enricher.

Each foreign key appears twice in the logical schema: as a forward entry on
the child table and as a reverse ("child") entry on the parent table, paired
by constraint name. This module pairs the two entries and names both
navigations:

- the forward navigation (child -> parent) is named after the child-side
  foreign-key column, without its ``Id`` suffix
- the reverse navigation (parent -> children) is named after the child class
"""

import logging
from typing import List

from ..exceptions import RelationshipError
from .allocator import UniqueNameAllocator
from .models import LogicalForeignKey, LogicalSchema, LogicalTable, RegistryNamespace
from .naming import NamingConventions

logger = logging.getLogger(__name__)


class ForeignKeyPairer:
    """
    Pairs forward and reverse foreign-key entries and allocates their navigation names.

    Naming consults the finished column registries, so it must only run once
    column naming has completed for every table.
    """

    def __init__(self, allocator: UniqueNameAllocator, conventions: NamingConventions):
        self.allocator = allocator
        self.conventions = conventions

    def find_reverse(self, parent: LogicalTable, fk: LogicalForeignKey) -> LogicalForeignKey:
        """
        Locate the mirror entry of ``fk`` among the parent's child foreign keys.

        Raises:
            RelationshipError: If the mirror entry is missing or ambiguous
        """
        matches: List[LogicalForeignKey] = [
            reverse for reverse in parent.child_foreign_keys
            if reverse.constraint_name == fk.constraint_name
        ]
        if len(matches) != 1:
            problem = "is missing" if not matches else f"appears {len(matches)} times"
            raise RelationshipError(
                f"Reverse entry of foreign key {fk.constraint_name} {problem} "
                f"on table {parent.qualified_name}",
                constraint_name=fk.constraint_name,
                child_table=f"{fk.child_schema}.{fk.child_table}",
                parent_table=parent.qualified_name,
            )
        return matches[0]

    def pair_and_name(self, schema: LogicalSchema, child: LogicalTable,
                      fk: LogicalForeignKey) -> bool:
        """
        Name one relationship.

        Args:
            schema: The logical schema, used to locate the parent table
            child: Table owning the forward entry
            fk: Forward entry to name

        Returns:
            True if both navigations were named, False if the relationship was skipped

        Raises:
            RelationshipError: If the input schema is inconsistent for this relationship
        """
        parent = schema.find_table(fk.parent_schema, fk.parent_table)
        if parent is None:
            logger.warning(
                f"Can't find table {fk.parent_schema}.{fk.parent_table} referenced by "
                f"{fk.constraint_name} on {child.qualified_name}, skipping relationship"
            )
            return False

        if not parent.is_included:
            logger.debug(
                f"Skipping {fk.constraint_name}: parent table {parent.qualified_name} is excluded"
            )
            return False

        reverse = self.find_reverse(parent, fk)
        self.name_pair(parent, child, fk, reverse)
        return True

    def name_pair(self, parent: LogicalTable, child: LogicalTable,
                  fk: LogicalForeignKey, reverse: LogicalForeignKey) -> None:
        """Allocate the forward name on the child and the reverse name on the parent."""
        fk_column = fk.first_child_column
        if fk_column is None:
            raise RelationshipError(
                f"Foreign key {fk.constraint_name} has no columns",
                constraint_name=fk.constraint_name,
                child_table=child.qualified_name,
                parent_table=parent.qualified_name,
            )

        navigation_name = self.allocator.allocate(
            child,
            RegistryNamespace.FORWARD_NAVIGATIONS,
            fk.constraint_name,
            self.conventions.foreign_key_to_navigation(fk_column),
        )
        fk.assign_navigation_name(navigation_name)

        reverse_name = self.allocator.allocate(
            parent,
            RegistryNamespace.REVERSE_NAVIGATIONS,
            fk.constraint_name,
            self.conventions.class_to_reverse_navigation(child.class_name),
        )
        reverse.assign_navigation_name(reverse_name)

        logger.debug(
            f"{fk.constraint_name}: {child.class_name}.{navigation_name} -> "
            f"{parent.class_name}.{reverse_name}"
        )
