"""
Column facet derivation for Schema Enricher.

Besides an identifier and a type, an entity property needs a few
configuration decisions: is it required, does it have a maximum length, does
it map to a differently-named column, which default value should be declared.
They all depend only on the physical column and its resolved type, so they are
computed once here and exposed on the enriched model.
"""

from typing import Optional

from ..constants import (
    FIXED_LENGTH_SQL_TYPES,
    NUMERIC_VALUE_ALIASES,
    UNLIMITED_LENGTH,
    ZERO_DEFAULT_EXPRESSION,
)
from .models import ColumnFacets, TypeDecision
from .physical import Column

STRING_TYPE = "string"


def _default_value_sql(column: Column, decision: Optional[TypeDecision]) -> Optional[str]:
    default = column.default_setting
    if not default:
        return None
    # Non-nullable numerics default to zero anyway
    if (
        decision is not None
        and decision.type_name in NUMERIC_VALUE_ALIASES
        and not column.is_nullable
        and default == ZERO_DEFAULT_EXPRESSION
    ):
        return None
    return default


def derive_facets(column: Column, property_name: str,
                  decision: Optional[TypeDecision]) -> ColumnFacets:
    """
    Derive the configuration facets of a column.

    Args:
        column: Physical column
        property_name: Identifier allocated for the column
        decision: Resolved type, or None when the type could not be resolved

    Returns:
        Column facets
    """
    is_string = decision is not None and decision.type_name == STRING_TYPE

    max_length = None
    if is_string and column.max_length is not None and column.max_length != UNLIMITED_LENGTH:
        max_length = column.max_length

    return ColumnFacets(
        # Reference types are always nullable, so non-nullable strings must be flagged
        is_required=is_string and not column.is_nullable and not column.is_primary_key_member,
        max_length=max_length,
        is_fixed_length=(column.sql_data_type or "").lower() in FIXED_LENGTH_SQL_TYPES,
        column_name_override=column.column_name if column.column_name != property_name else None,
        default_value_sql=_default_value_sql(column, decision),
        is_database_generated=column.is_identity or column.is_computed,
    )
