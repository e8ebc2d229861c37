"""
Tests for configuration loading and validation
"""

from argparse import Namespace
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase

from schema_enricher.config_validation import ToolConfigSchema, load_config
from schema_enricher.constants import CSHARP, PYTHON
from schema_enricher.exceptions import ConfigurationError


def cli_args(**overrides):
    values = {"schema_file": None, "output_file": None, "target_language": None}
    values.update(overrides)
    return Namespace(**values)


class TestToolConfigSchema(TestCase):
    """Test cases for ToolConfigSchema"""

    def test_defaults(self):
        """Test defaults"""
        config = ToolConfigSchema()
        self.assertEqual(config.target_language, "csharp")
        self.assertIs(config.language, CSHARP)
        self.assertEqual(config.collision_bound, 100)
        self.assertFalse(config.include_views)
        self.assertEqual(config.default_schema, "dbo")

    def test_python_language(self):
        """Test python language"""
        config = ToolConfigSchema(target_language="python")
        self.assertIs(config.language, PYTHON)
        self.assertEqual(config.language.file_extension, ".py")

    def test_unknown_language_rejected(self):
        """Test unknown language rejected"""
        with self.assertRaises(ValueError):
            ToolConfigSchema(target_language="cobol")

    def test_collision_bound_must_be_positive(self):
        """Test collision bound must be positive"""
        with self.assertRaises(ValueError):
            ToolConfigSchema(collision_bound=0)

    def test_table_filters_are_stripped(self):
        """Test table filters are stripped"""
        config = ToolConfigSchema(exclude_tables=[" Audit ", "Log"])
        self.assertEqual(config.exclude_tables, ["Audit", "Log"])

    def test_blank_table_filter_rejected(self):
        """Test blank table filter rejected"""
        with self.assertRaises(ValueError):
            ToolConfigSchema(exclude_table_prefixes=["  "])

    def test_table_inclusion(self):
        """Test table inclusion"""
        config = ToolConfigSchema()
        self.assertTrue(config.is_table_included("Customer"))
        self.assertFalse(config.is_table_included("QRTZ_TRIGGERS"))
        self.assertFalse(config.is_table_included("CustomerTMP"))
        self.assertFalse(config.is_table_included("Customer2"))
        self.assertFalse(config.is_table_included("Job"))
        self.assertFalse(config.is_table_included("vCustomer", is_view=True))
        self.assertTrue(
            ToolConfigSchema(include_views=True).is_table_included("vCustomer", is_view=True)
        )


class TestLoadConfig(TestCase):
    """Test cases for load_config"""

    def test_yaml_file_with_cli_override(self):
        """Test yaml file with cli override"""
        with TemporaryDirectory() as tmp:
            config_file = Path(tmp) / "config.yaml"
            config_file.write_text(
                "schema_file: schema.json\n"
                "target_language: csharp\n"
                "include_views: true\n"
                "collision_bound: 10\n",
                encoding="utf-8",
            )
            config = load_config(str(config_file), cli_args(target_language="python"))

        self.assertEqual(config.target_language, "python")
        self.assertTrue(config.include_views)
        self.assertEqual(config.collision_bound, 10)
        self.assertTrue(Path(config.schema_file).is_absolute())

    def test_missing_file_uses_defaults(self):
        """Test missing file uses defaults"""
        with self.assertLogs("schema_enricher.config_validation", level="WARNING"):
            config = load_config("/nonexistent/config.yaml", cli_args(schema_file="db.json"))
        self.assertEqual(config.target_language, "csharp")
        self.assertEqual(Path(config.schema_file).name, "db.json")

    def test_invalid_values_exit(self):
        """Test invalid values exit"""
        with TemporaryDirectory() as tmp:
            config_file = Path(tmp) / "config.yaml"
            config_file.write_text("collision_bound: -5\n", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                load_config(str(config_file), cli_args())
        self.assertEqual(ctx.exception.code, 1)


class TestConfigurationError(TestCase):
    """Test cases for ConfigurationError formatting"""

    def test_str_includes_context_and_suggestions(self):
        """Test str includes context and suggestions"""
        error = ConfigurationError("No physical schema file given", config_file="enricher.yaml")
        text = str(error)
        self.assertIn("Error Code: CONFIG_ERROR", text)
        self.assertIn("config_file: enricher.yaml", text)
        self.assertIn("Suggestions:", text)
        self.assertEqual(error.message, "No physical schema file given")
