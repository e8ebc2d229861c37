"""
Domain module for Schema Enricher.

This module contains the naming engine: physical and logical schema models,
tokenizing and casing, unique name allocation, type mapping and relationship
naming. Nothing here does I/O.
"""

from .physical import (
    Column,
    ForeignKey,
    ForeignKeyColumn,
    Index,
    IndexColumn,
    Table,
    DatabaseSchema
)

from .models import (
    NamingPhase,
    RegistryNamespace,
    NameRegistry,
    TypeDecision,
    ColumnFacets,
    LogicalColumn,
    LogicalForeignKey,
    LogicalIndex,
    LogicalTable,
    LogicalSchema
)

from .naming import (
    NamingConventions,
    split_words,
    title_case,
    to_identifier,
    clean_identifier,
    sanitize_identifier,
    strip_id_suffix,
    generate_class_name
)

from .allocator import UniqueNameAllocator
from .type_mapping import TypeMapper, verbose_type_name
from .facets import derive_facets
from .relationships import ForeignKeyPairer

__all__ = [
    # Physical schema
    'Column',
    'ForeignKey',
    'ForeignKeyColumn',
    'Index',
    'IndexColumn',
    'Table',
    'DatabaseSchema',

    # Logical schema
    'NamingPhase',
    'RegistryNamespace',
    'NameRegistry',
    'TypeDecision',
    'ColumnFacets',
    'LogicalColumn',
    'LogicalForeignKey',
    'LogicalIndex',
    'LogicalTable',
    'LogicalSchema',

    # Naming
    'NamingConventions',
    'split_words',
    'title_case',
    'to_identifier',
    'clean_identifier',
    'sanitize_identifier',
    'strip_id_suffix',
    'generate_class_name',

    # Allocation, types and relationships
    'UniqueNameAllocator',
    'TypeMapper',
    'verbose_type_name',
    'derive_facets',
    'ForeignKeyPairer',
]
