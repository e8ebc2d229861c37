"""
Physical schema models for Schema Enricher.

These models describe the database as it was scanned by the schema reader:
tables, columns, keys and indexes, with no code-generation concerns. They are
immutable once loaded; the enricher only reads them. Field aliases follow the
PascalCase keys of the ``dbschema.json`` files produced by the schema reader,
while Python code uses the snake_case field names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import TableTypes


class PhysicalModel(BaseModel):
    """Base for all physical schema models."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class Column(PhysicalModel):
    """A single table column."""

    column_name: str = Field(..., alias="ColumnName", min_length=1)
    ordinal_position: int = Field(0, alias="OrdinalPosition")
    default_setting: Optional[str] = Field(None, alias="DefaultSetting")
    is_nullable: bool = Field(False, alias="IsNullable")
    sql_data_type: str = Field("", alias="SqlDataType")
    max_length: Optional[int] = Field(None, alias="MaxLength")
    numeric_precision: Optional[int] = Field(None, alias="NumericPrecision")
    numeric_scale: Optional[int] = Field(None, alias="NumericScale")
    is_identity: bool = Field(False, alias="IsIdentity")
    is_computed: bool = Field(False, alias="IsComputed")
    is_primary_key_member: bool = Field(False, alias="IsPrimaryKeyMember")
    is_foreign_key_member: bool = Field(False, alias="IsForeignKeyMember")
    column_description: Optional[str] = Field(None, alias="ColumnDescription")
    clr_type: str = Field("", alias="ClrType")


class ForeignKeyColumn(PhysicalModel):
    """One (child column, parent column) pair of a foreign key."""

    fk_column_name: str = Field(..., alias="FKColumnName", min_length=1)
    pk_column_name: str = Field(..., alias="PKColumnName", min_length=1)


class ForeignKey(PhysicalModel):
    """
    A foreign key constraint.

    The same constraint is listed twice in a schema: among the ``foreign_keys``
    of the child table and among the ``child_foreign_keys`` of the parent
    table. The constraint name pairs the two entries.
    """

    foreign_key_constraint_name: str = Field(..., alias="ForeignKeyConstraintName", min_length=1)
    fk_table_schema: str = Field("", alias="FKTableSchema")
    fk_table_name: str = Field(..., alias="FKTableName")
    pk_table_schema: str = Field("", alias="PKTableSchema")
    pk_table_name: str = Field(..., alias="PKTableName")
    primary_key_name: Optional[str] = Field(None, alias="PrimaryKeyName")
    on_delete_cascade: Optional[str] = Field(None, alias="OnDeleteCascade")
    on_update_cascade: Optional[str] = Field(None, alias="OnUpdateCascade")
    columns: List[ForeignKeyColumn] = Field(default_factory=list, alias="Columns")


class IndexColumn(PhysicalModel):
    """A column participating in an index."""

    column_name: str = Field(..., alias="ColumnName", min_length=1)
    index_ordinal_position: int = Field(0, alias="IndexOrdinalPosition")
    is_descending_key: bool = Field(False, alias="IsDescendingKey")
    is_included_column: bool = Field(False, alias="IsIncludedColumn")


class Index(PhysicalModel):
    """A table index or unique constraint."""

    index_name: str = Field(..., alias="IndexName")
    physical_type: str = Field("", alias="PhysicalType")
    logical_type: str = Field("", alias="LogicalType")
    is_unique: bool = Field(False, alias="IsUnique")
    columns: List[IndexColumn] = Field(default_factory=list, alias="Columns")


class Table(PhysicalModel):
    """A table or view."""

    table_schema: str = Field("", alias="TableSchema")
    table_name: str = Field(..., alias="TableName", min_length=1)
    table_type: str = Field(TableTypes.BASE_TABLE, alias="TableType")
    table_description: Optional[str] = Field(None, alias="TableDescription")
    primary_key_name: Optional[str] = Field(None, alias="PrimaryKeyName")
    primary_key_is_clustered: bool = Field(False, alias="PrimaryKeyIsClustered")
    columns: List[Column] = Field(default_factory=list, alias="Columns")
    foreign_keys: List[ForeignKey] = Field(default_factory=list, alias="ForeignKeys")
    child_foreign_keys: List[ForeignKey] = Field(default_factory=list, alias="ChildForeignKeys")
    indexes: List[Index] = Field(default_factory=list, alias="Indexes")

    @property
    def is_view(self) -> bool:
        return self.table_type.upper() == TableTypes.VIEW


class DatabaseSchema(PhysicalModel):
    """The whole scanned database."""

    tables: List[Table] = Field(default_factory=list, alias="Tables")
