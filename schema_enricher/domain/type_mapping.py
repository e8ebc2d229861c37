"""
Type mapping domain logic for Schema Enricher.

This module maps the value-type descriptor the schema reader attached to each
column (a framework type name such as ``System.Int32``) to the short type token
used in generated code, decides whether the type is a value type or a
reference type, and projects the column's nullability onto it.
"""

import logging
from typing import Optional, Tuple

from ..constants import (
    ARRAY_SUFFIX,
    DECIMAL_SQL_TYPE,
    KNOWN_FRAMEWORK_TYPES,
    REFERENCE_TYPE_ALIASES,
    TYPE_ALIASES,
    VERBATIM_SQL_TYPES,
)
from ..exceptions import TypeMappingError
from .models import TypeDecision
from .physical import Column

logger = logging.getLogger(__name__)


def _lookup(type_name: str) -> Optional[Tuple[str, bool]]:
    """Return (short name, is value type) for a known framework type."""
    alias = TYPE_ALIASES.get(type_name)
    if alias is not None:
        return alias, alias not in REFERENCE_TYPE_ALIASES
    return KNOWN_FRAMEWORK_TYPES.get(type_name)


def verbose_type_name(column: Column) -> Optional[str]:
    """
    Return the database type annotation for a column, if it needs one.

    Some SQL types can't be inferred back from the generated type alone
    (``money`` and ``decimal`` both become ``decimal``), so the exact database
    type is kept for descriptive annotations.
    """
    sql_type = (column.sql_data_type or "").lower()
    if sql_type in VERBATIM_SQL_TYPES:
        return sql_type
    if sql_type == DECIMAL_SQL_TYPE:
        return f"decimal({column.numeric_precision}, {column.numeric_scale})"
    return None


class TypeMapper:
    """Resolves the generated type of a column."""

    def __init__(self):
        self.unmapped_types = set()

    def resolve_type(self, descriptor: str) -> Tuple[str, bool, bool]:
        """
        Resolve a value-type descriptor.

        Args:
            descriptor: Framework type name reported for the column

        Returns:
            (type token, is value type, is known)
        """
        known = _lookup(descriptor)
        if known is not None:
            return known[0], known[1], True

        if descriptor.endswith(ARRAY_SUFFIX):
            element = _lookup(descriptor[:-len(ARRAY_SUFFIX)])
            if element is not None:
                # Arrays are reference types whatever their element type
                return f"{element[0]}{ARRAY_SUFFIX}", False, True

        # Vendor-specific types (geography, hierarchyid, ...) are assumed to be reference types
        self.unmapped_types.add(descriptor)
        return descriptor, False, False

    def resolve(self, column: Column, table_name: str = None) -> TypeDecision:
        """
        Resolve the type decision of a column.

        Raises:
            TypeMappingError: If the column carries no type descriptor
        """
        descriptor = (column.clr_type or "").strip()
        if not descriptor:
            raise TypeMappingError(
                f"Column '{column.column_name}' has no value type",
                table=table_name,
                column=column.column_name,
            )

        type_name, is_value_type, is_known = self.resolve_type(descriptor)
        if not is_known:
            logger.warning(
                f"Unknown type {descriptor} for column {table_name}.{column.column_name} - "
                f"assuming a reference type; you may need to add a reference to your project"
            )

        return TypeDecision(
            type_name=type_name,
            is_value_type=is_value_type,
            is_nullable=column.is_nullable,
            is_known=is_known,
            verbose_type_name=verbose_type_name(column),
        )
