"""
Physical schema loading for Schema Enricher.

Reads the ``dbschema.json`` document written by the schema reader into the
physical schema models.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from schema_enricher.domain.physical import DatabaseSchema
from schema_enricher.exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


def parse_physical_schema(data: Dict[str, Any], source: str = None) -> DatabaseSchema:
    """Validate a decoded schema document."""
    try:
        return DatabaseSchema.model_validate(data)
    except ValidationError as e:
        raise SchemaLoadError(
            f"Schema document does not match the expected layout ({e.error_count()} errors)",
            schema_file=source,
            context={'first_error': e.errors()[0].get('msg')},
        ) from e


def load_physical_schema(path: Union[str, Path]) -> DatabaseSchema:
    """
    Load a physical schema from a JSON file.

    Raises:
        SchemaLoadError: If the file is missing, isn't JSON, or doesn't describe a schema
    """
    schema_path = Path(path)
    if not schema_path.is_file():
        raise SchemaLoadError(f"Schema file not found: {schema_path}", schema_file=str(schema_path))

    try:
        # utf-8-sig: schema readers on Windows often write a BOM
        with open(schema_path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"Invalid JSON in schema file: {e}", schema_file=str(schema_path)
        ) from e

    if not isinstance(data, dict):
        raise SchemaLoadError(
            "Schema file must contain a JSON object",
            schema_file=str(schema_path),
            context={'loaded_type': type(data).__name__},
        )

    schema = parse_physical_schema(data, str(schema_path))
    logger.debug(f"Loaded {len(schema.tables)} tables from {schema_path}")
    return schema
