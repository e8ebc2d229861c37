"""
Builders for physical schema documents used across the test suite.

They produce the same PascalCase layout as the ``dbschema.json`` files the
schema reader writes, so tests exercise the real pydantic aliases.
"""

from typing import Any, Dict, List, Optional

from schema_enricher.domain.physical import DatabaseSchema


def column(name: str, clr_type: str = "System.Int32", nullable: bool = False,
           sql_type: str = "int", ordinal: int = 1, **extra) -> Dict[str, Any]:
    data = {
        "ColumnName": name,
        "OrdinalPosition": ordinal,
        "IsNullable": nullable,
        "SqlDataType": sql_type,
        "ClrType": clr_type,
    }
    data.update(extra)
    return data


def pk_column(name: str, ordinal: int = 1) -> Dict[str, Any]:
    return column(name, ordinal=ordinal, IsPrimaryKeyMember=True, IsIdentity=True)


def foreign_key(constraint: str, child: str, parent: str, fk_column: str,
                pk_column_name: Optional[str] = None, child_schema: str = "dbo",
                parent_schema: str = "dbo", on_delete: str = "NO_ACTION") -> Dict[str, Any]:
    return {
        "ForeignKeyConstraintName": constraint,
        "FKTableSchema": child_schema,
        "FKTableName": child,
        "PKTableSchema": parent_schema,
        "PKTableName": parent,
        "OnDeleteCascade": on_delete,
        "Columns": [
            {"FKColumnName": fk_column, "PKColumnName": pk_column_name or fk_column},
        ],
    }


def table(name: str, columns: List[Dict[str, Any]], schema: str = "dbo",
          foreign_keys: Optional[List[Dict[str, Any]]] = None,
          child_foreign_keys: Optional[List[Dict[str, Any]]] = None,
          indexes: Optional[List[Dict[str, Any]]] = None,
          table_type: str = "TABLE") -> Dict[str, Any]:
    return {
        "TableSchema": schema,
        "TableName": name,
        "TableType": table_type,
        "Columns": columns,
        "ForeignKeys": foreign_keys or [],
        "ChildForeignKeys": child_foreign_keys or [],
        "Indexes": indexes or [],
    }


def schema(*tables: Dict[str, Any]) -> DatabaseSchema:
    return DatabaseSchema.model_validate({"Tables": list(tables)})


def person_address_type_schema() -> DatabaseSchema:
    """``Person`` references ``AddressType`` twice (bill-to and ship-to)."""
    bill_to = foreign_key("FK_Person_AddressType_BillTo", "Person", "AddressType",
                          "BillToAddressTypeID", "AddressTypeID")
    ship_to = foreign_key("FK_Person_AddressType_ShipTo", "Person", "AddressType",
                          "ShipToAddressTypeID", "AddressTypeID")
    return schema(
        table(
            "AddressType",
            [
                pk_column("AddressTypeID"),
                column("Name", "System.String", sql_type="nvarchar", ordinal=2, MaxLength=50),
            ],
            child_foreign_keys=[bill_to, ship_to],
        ),
        table(
            "Person",
            [
                pk_column("BusinessEntityID"),
                column("BillToAddressTypeID", ordinal=2, IsForeignKeyMember=True),
                column("ShipToAddressTypeID", nullable=True, ordinal=3, IsForeignKeyMember=True),
                column("FirstName", "System.String", sql_type="nvarchar", ordinal=4, MaxLength=50),
            ],
            foreign_keys=[bill_to, ship_to],
        ),
    )
