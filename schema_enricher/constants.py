"""
Centralized constants for Schema Enricher.

This module contains the configuration defaults, the reserved keyword tables of
each target language, and the type lookup tables used while enriching a
database schema. Keeping them here makes it easy for contributors to support a
new target language or a new vendor type without touching the algorithms.
"""

from typing import Dict, FrozenSet, List, Tuple


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    TARGET_LANGUAGE = "csharp"
    INCLUDE_VIEWS = False
    SCHEMA_QUALIFIED_CLASS_NAMES = False
    WITH_ATTRIBUTES = False

    # Maximum number of numeric suffixes tried before accepting a clash
    COLLISION_BOUND = 100

    DEFAULT_SCHEMA = "dbo"

    EXCLUDE_TABLE_PREFIXES: List[str] = ["QRTZ_", "webpages_"]
    EXCLUDE_TABLE_SUFFIXES: List[str] = ["2", "TMP"]
    EXCLUDE_TABLES: List[str] = [
        "Job", "JobParameter", "JobQueue", "Role", "Schema",
        "Server", "Set", "State", "Hash", "Counter",
    ]


class TableTypes:
    """Table kinds reported by the schema reader."""

    BASE_TABLE = "TABLE"
    VIEW = "VIEW"


# =============================================================================
# TARGET LANGUAGES
# =============================================================================

CSHARP_KEYWORDS: FrozenSet[str] = frozenset({
    "abstract", "event", "new", "struct", "as", "explicit", "null",
    "switch", "base", "extern", "object", "this", "bool", "false", "operator", "throw",
    "break", "finally", "out", "true", "byte", "fixed", "override", "try", "case", "float",
    "params", "typeof", "catch", "for", "private", "uint", "char", "foreach", "protected",
    "ulong", "checked", "goto", "public", "unchecked", "class", "if", "readonly", "unsafe",
    "const", "implicit", "ref", "ushort", "continue", "in", "return", "using", "decimal",
    "int", "sbyte", "virtual", "default", "interface", "sealed", "volatile", "delegate",
    "internal", "short", "void", "do", "is", "sizeof", "while", "double", "lock",
    "stackalloc", "else", "long", "static", "enum", "namespace", "string",
})

PYTHON_KEYWORDS: FrozenSet[str] = frozenset({
    "False", "None", "True", "and", "as", "assert", "async", "await",
    "break", "class", "continue", "def", "del", "elif", "else", "except",
    "finally", "for", "from", "global", "if", "import", "in", "is",
    "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
    "while", "with", "yield",
})


class TargetLanguage:
    """
    Reserved words and verbatim-identifier escape convention of a target language.

    C# escapes a keyword with a leading ``@`` (``@class``) while Python has no
    verbatim identifiers, so a trailing underscore is used instead (``class_``).
    """

    def __init__(self, name: str, keywords: FrozenSet[str], escape_prefix: str = "",
                 escape_suffix: str = "", file_extension: str = ""):
        self.name = name
        self.keywords = keywords
        self.escape_prefix = escape_prefix
        self.escape_suffix = escape_suffix
        self.file_extension = file_extension

    def is_reserved(self, identifier: str) -> bool:
        return identifier in self.keywords

    def escape(self, identifier: str) -> str:
        """Return the identifier escaped if it is a reserved keyword."""
        if self.is_reserved(identifier):
            return f"{self.escape_prefix}{identifier}{self.escape_suffix}"
        return identifier

    def __repr__(self) -> str:
        return f"TargetLanguage({self.name!r})"


CSHARP = TargetLanguage("csharp", CSHARP_KEYWORDS, escape_prefix="@", file_extension=".cs")
PYTHON = TargetLanguage("python", PYTHON_KEYWORDS, escape_suffix="_", file_extension=".py")

TARGET_LANGUAGES: Dict[str, TargetLanguage] = {
    CSHARP.name: CSHARP,
    PYTHON.name: PYTHON,
}


def get_target_language(name: str) -> TargetLanguage:
    """Look up a target language by name (case-insensitive)."""
    try:
        return TARGET_LANGUAGES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported target language: {name}. "
            f"Supported languages are: {', '.join(sorted(TARGET_LANGUAGES))}"
        )


# =============================================================================
# TYPE MAPPINGS
# =============================================================================

# Framework type name -> short alias preferred in generated code
TYPE_ALIASES: Dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int32": "int",
    "System.Int64": "long",
    "System.Object": "object",
    "System.SByte": "sbyte",
    "System.Int16": "short",
    "System.String": "string",
    "System.UInt32": "uint",
    "System.UInt64": "ulong",
    "System.Void": "void",
}

# Reference types among the aliased ones; everything else in TYPE_ALIASES is a value type
REFERENCE_TYPE_ALIASES: FrozenSet[str] = frozenset({"object", "string"})

# Known framework types without an alias: full name -> (short name, is value type)
KNOWN_FRAMEWORK_TYPES: Dict[str, Tuple[str, bool]] = {
    "System.DateTime": ("DateTime", True),
    "System.DateTimeOffset": ("DateTimeOffset", True),
    "System.TimeSpan": ("TimeSpan", True),
    "System.Guid": ("Guid", True),
    "System.UInt16": ("UInt16", True),
    "System.IntPtr": ("IntPtr", True),
    "System.UIntPtr": ("UIntPtr", True),
    "System.DBNull": ("DBNull", False),
    "System.Type": ("Type", False),
    "System.Uri": ("Uri", False),
    "System.Xml.XmlDocument": ("XmlDocument", False),
    "System.Xml.Linq.XDocument": ("XDocument", False),
}

NUMERIC_VALUE_ALIASES: FrozenSet[str] = frozenset({
    "int", "decimal", "byte", "float", "long", "double", "short", "uint", "ulong",
})

# SQL types whose name is used verbatim as the verbose type annotation
VERBATIM_SQL_TYPES: FrozenSet[str] = frozenset({"datetime", "smallmoney", "money", "xml"})

DECIMAL_SQL_TYPE = "decimal"
FIXED_LENGTH_SQL_TYPES: FrozenSet[str] = frozenset({"char", "nchar"})

# Default expression SQL Server emits for zero-initialised numerics
ZERO_DEFAULT_EXPRESSION = "((0))"

NULLABLE_MARKER = "?"
ARRAY_SUFFIX = "[]"
UNLIMITED_LENGTH = -1


# =============================================================================
# RELATIONSHIPS AND INDEXES
# =============================================================================

class DeleteActions:
    """Referential delete actions reported by the schema reader."""

    CASCADE = "CASCADE"
    NO_ACTION = "NO_ACTION"
    SET_NULL = "SET_NULL"
    SET_DEFAULT = "SET_DEFAULT"


class IndexTypes:
    """Physical and logical index kinds reported by the schema reader."""

    CLUSTERED = "CLUSTERED"
    NONCLUSTERED = "NONCLUSTERED"
    CONFIGURABLE_PHYSICAL: FrozenSet[str] = frozenset({CLUSTERED, NONCLUSTERED})

    PRIMARY_KEY = "PRIMARY_KEY"
    UNIQUE_INDEX = "UNIQUE_INDEX"
    UNIQUE_CONSTRAINT = "UNIQUE_CONSTRAINT"
    UNIQUE_LOGICAL: FrozenSet[str] = frozenset({UNIQUE_INDEX, UNIQUE_CONSTRAINT})


# Suffix stripped from a foreign-key column to derive the navigation name
FOREIGN_KEY_ID_SUFFIX = "id"
