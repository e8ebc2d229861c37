# File: schema_enricher/config_validation.py
from argparse import Namespace
import sys
import logging
from typing import List, Optional, Dict, Any, Literal
import yaml
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    ConfigDict,
)

from schema_enricher.constants import DefaultConfig, TargetLanguage, get_target_language

logger = logging.getLogger(__name__)


# --- Pydantic Models for Configuration Schema ---
class ToolConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    schema_file: Optional[str] = Field(
        default=None,
        description="Path to the physical schema JSON produced by the schema reader.",
    )
    output_file: Optional[str] = Field(
        default=None,
        description="Where to write the enrichment report (YAML). Defaults to stdout.",
    )
    target_language: Literal["csharp", "python"] = Field(
        default=DefaultConfig.TARGET_LANGUAGE,
        description="Language whose reserved keywords must be escaped.",
    )
    include_views: bool = Field(
        default=DefaultConfig.INCLUDE_VIEWS,
        description="If True, views get entities too.",
    )
    exclude_table_prefixes: List[str] = Field(
        default_factory=lambda: list(DefaultConfig.EXCLUDE_TABLE_PREFIXES),
        description="Tables whose name starts with one of these prefixes are skipped.",
    )
    exclude_table_suffixes: List[str] = Field(
        default_factory=lambda: list(DefaultConfig.EXCLUDE_TABLE_SUFFIXES),
        description="Tables whose name ends with one of these suffixes are skipped.",
    )
    exclude_tables: List[str] = Field(
        default_factory=lambda: list(DefaultConfig.EXCLUDE_TABLES),
        description="Table names (without schema) that are skipped.",
    )
    schema_qualified_class_names: bool = Field(
        default=DefaultConfig.SCHEMA_QUALIFIED_CLASS_NAMES,
        description="Prefix class names of tables outside the default schema with the schema name.",
    )
    default_schema: str = Field(
        default=DefaultConfig.DEFAULT_SCHEMA,
        min_length=1,
        description="Schema whose tables never get a schema prefix.",
    )
    with_attributes: bool = Field(
        default=DefaultConfig.WITH_ATTRIBUTES,
        description="Entities are configured with attributes instead of fluent calls.",
    )
    collision_bound: int = Field(
        default=DefaultConfig.COLLISION_BOUND,
        ge=1,
        le=10000,
        description="Numeric suffixes tried before a clashing identifier is accepted.",
    )

    @property
    def language(self) -> TargetLanguage:
        return get_target_language(self.target_language)

    @field_validator(
        "exclude_table_prefixes", "exclude_table_suffixes", "exclude_tables", mode="before"
    )
    @classmethod
    def check_table_names_list(cls, v: Optional[List[Any]]) -> List[str]:
        """Ensure items in table filter lists are non-empty strings."""
        if v is None:
            return []
        if not isinstance(v, list):
            raise TypeError("Table filters must be a list.")
        processed_list = []
        for index, item in enumerate(v):
            if not isinstance(item, str):
                raise TypeError(
                    f"Item at index {index} must be a string, found: {type(item).__name__}"
                )
            stripped_item = item.strip()
            if not stripped_item:
                raise ValueError(
                    f"Item at index {index} cannot be empty or just whitespace."
                )
            processed_list.append(stripped_item)
        return processed_list

    def is_table_included(self, table_name: str, is_view: bool = False) -> bool:
        """Check if a table should get an entity."""
        if is_view and not self.include_views:
            return False
        if any(table_name.startswith(prefix) for prefix in self.exclude_table_prefixes):
            return False
        if any(table_name.endswith(suffix) for suffix in self.exclude_table_suffixes):
            return False
        return table_name not in self.exclude_tables

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any]) -> ToolConfigSchema:
    """
    Validates a raw configuration dictionary against the ToolConfigSchema.
    Exits with error messages if validation fails.
    """
    try:
        validated_config = ToolConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your config file or arguments."
        )
        print("\n--- Configuration Errors ---", file=sys.stderr)
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            msg = error.get("msg", "Unknown validation error")

            print(f"  - Location: '{loc_str}'", file=sys.stderr)
            print(f"    Error:    {msg}", file=sys.stderr)

            if "target_language" in loc_parts:
                print(
                    "    Hint:     Supported target languages are 'csharp' and 'python'.",
                    file=sys.stderr,
                )

        print("----------------------------", file=sys.stderr)
        sys.exit(1)


def load_config(config_path: Optional[str], cli_args: Namespace) -> ToolConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    Exits with error messages if validation fails.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML file {config_path}: {e}")
                logger.warning("Proceeding with defaults and CLI arguments only.")
                yaml_config = None

            if yaml_config and isinstance(yaml_config, dict):
                raw_config.update(yaml_config)
                logger.debug(f"Loaded configuration from {config_path}")
            elif yaml_config:
                logger.warning(
                    f"Content in config file {config_path} is not a dictionary. Ignoring file content."
                )
        else:
            logger.warning(
                f"Config file not found at {config_path}. Using defaults and CLI arguments."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    cli_dict = vars(cli_args)
    overridden_keys = set()
    for key, value in cli_dict.items():
        if value is not None and key in ToolConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {overridden_keys}")

    # 3. Validate
    logger.info("Validating final configuration...")
    validated_config: ToolConfigSchema = validate_and_parse_config(raw_config)

    # 4. Resolve paths
    if validated_config.schema_file:
        validated_config.schema_file = str(Path(validated_config.schema_file).resolve())
    if validated_config.output_file:
        validated_config.output_file = str(Path(validated_config.output_file).resolve())

    logger.info("Configuration loaded and validated successfully.")
    return validated_config
