"""
Custom exception hierarchy for Schema Enricher.

This module provides an exception system with rich context and recovery
guidance, so that a failure deep inside the naming engine still tells the
user which table, column or constraint was involved.
"""

from typing import Dict, Any, Optional, List


class SchemaEnricherError(Exception):
    """
    Base exception for all Schema Enricher errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(SchemaEnricherError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify all required fields are present",
                "Check the README for configuration examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaLoadError(SchemaEnricherError):
    """Raised when the physical schema file cannot be read or is malformed."""

    def __init__(self, message: str, schema_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if schema_file:
            context['schema_file'] = schema_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Verify the schema file exists and is valid JSON",
                "Re-extract the schema with the schema reader",
                "Check that table and column entries carry their required keys"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_LOAD_ERROR"
        )


class TypeMappingError(SchemaEnricherError):
    """Raised when a column carries no value-type descriptor at all."""

    def __init__(self, message: str, table: str = None, column: str = None, **kwargs):
        context = kwargs.get('context', {})
        if table:
            context['table'] = table
        if column:
            context['column'] = column

        super().__init__(
            message,
            context=context,
            suggestions=kwargs.get('suggestions', [
                "Check that the schema reader filled in the column type",
            ]),
            error_code="TYPE_MAPPING_ERROR"
        )


class RelationshipError(SchemaEnricherError):
    """Raised when a foreign key cannot be paired with its mirror entry."""

    def __init__(
        self,
        message: str,
        constraint_name: str = None,
        child_table: str = None,
        parent_table: str = None,
        **kwargs
    ):
        context = kwargs.get('context', {})
        if constraint_name:
            context['constraint_name'] = constraint_name
        if child_table:
            context['child_table'] = child_table
        if parent_table:
            context['parent_table'] = parent_table

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the parent table lists the constraint among its child foreign keys",
                "Re-extract the schema; both sides of a foreign key must be present",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="RELATIONSHIP_ERROR"
        )


class NamingPhaseError(SchemaEnricherError):
    """Raised when relationship naming starts before every table has its column names."""

    def __init__(self, message: str, tables: List[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if tables:
            context['tables'] = ", ".join(tables)

        super().__init__(
            message,
            context=context,
            suggestions=kwargs.get('suggestions', [
                "Run column naming for the whole schema before naming relationships",
            ]),
            error_code="NAMING_PHASE_ERROR"
        )
