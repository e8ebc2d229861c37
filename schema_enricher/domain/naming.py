"""
Naming convention utilities for Schema Enricher.

This module turns raw database names (column names, foreign-key columns, table
names) into identifiers that are valid in the target language:

1. ``split_words`` breaks a raw name into word-like tokens
2. ``to_identifier`` recombines the tokens in TitleCase, keeping a single
   lowercase leading letter (a view/table prefix such as ``v``) as is
3. the target language's reserved keywords are escaped

The identifiers produced here are candidates only; uniqueness within a table
is the job of ``UniqueNameAllocator``.
"""

import re
from typing import List, Sequence

from ..constants import CSHARP, FOREIGN_KEY_ID_SUFFIX, TargetLanguage


# Characters that can never appear in an identifier
_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")

# Zero-width boundaries between words
_WORD_BOUNDARY = re.compile(
    r"""
    (?<=[A-Z])(?=[A-Z][a-z0-9])           # acronym followed by a word: "ID|Card"
    | (?<=[a-z0-9])(?=[A-Z])              # camel hump: "business|Entity"
    | (?<=[A-Za-z0-9])(?=[^A-Za-z0-9])    # word followed by a separator
    | (?<=[^A-Za-z0-9])(?=[A-Za-z0-9])    # separator followed by a word
    """,
    re.VERBOSE,
)

_SEPARATOR_ONLY = re.compile(r"^[_\-]+$")


def split_words(name: str) -> List[str]:
    """
    Split a raw database name into words.

    Splits camelCase and TitleCase humps, underscores, dashes and any other
    character that is not allowed in an identifier. Uppercase acronyms stay
    together unless they run into a capitalized word.

    Args:
        name: Raw column, table or constraint name

    Returns:
        Non-empty word tokens in their original casing

    Example:
        >>> split_words("BusinessEntityID")
        ['Business', 'Entity', 'ID']
        >>> split_words("Employee_SSN")
        ['Employee', 'SSN']
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    cleaned = _INVALID_CHARS.sub("_", name)
    return [
        part for part in _WORD_BOUNDARY.split(cleaned)
        if part and not _SEPARATOR_ONLY.match(part)
    ]


def title_case(word: str) -> str:
    """Uppercase the first letter and lowercase the rest ("ID" -> "Id")."""
    return word[:1].upper() + word[1:].lower()


def to_identifier(words: Sequence[str], language: TargetLanguage = CSHARP) -> str:
    """
    Recombine words into a single identifier.

    Every word is title-cased, so acronyms are not preserved. The first word
    is kept verbatim when it is a single lowercase letter, which is assumed to
    be a naming prefix (``vSalesPerson`` for a view). Identifiers can't start
    with a digit and can't be a reserved keyword of the target language.

    Args:
        words: Tokens produced by ``split_words``
        language: Target language whose keywords must be escaped

    Returns:
        Candidate identifier (not yet guaranteed unique)

    Example:
        >>> to_identifier(["v", "Sales", "Person"])
        'vSalesPerson'
        >>> to_identifier(["Business", "Entity", "ID"])
        'BusinessEntityId'
    """
    parts = []
    for index, word in enumerate(words):
        if index == 0 and len(word) == 1 and word.islower():
            parts.append(word)
        else:
            parts.append(title_case(word))

    return _finish_identifier("".join(parts), language)


def _finish_identifier(name: str, language: TargetLanguage) -> str:
    if not name:
        return "_"
    if name[0].isdigit():
        name = "_" + name
    return language.escape(name)


def sanitize_identifier(name: str, language: TargetLanguage = CSHARP) -> str:
    """
    Make a raw name usable as an identifier without changing its casing.

    Invalid characters become underscores, a leading digit gets an underscore
    prefix and reserved keywords are escaped.

    Example:
        >>> sanitize_identifier("ParentSKU")
        'ParentSKU'
        >>> sanitize_identifier("Unit Price")
        'Unit_Price'
    """
    return _finish_identifier(_INVALID_CHARS.sub("_", name), language)


def clean_identifier(name: str, language: TargetLanguage = CSHARP) -> str:
    """Convert a raw database name into a candidate identifier."""
    return to_identifier(split_words(name), language)


def strip_id_suffix(column_name: str) -> str:
    """
    Derive a navigation base name from a foreign-key column.

    Example:
        >>> strip_id_suffix("ShipToAddressTypeID")
        'ShipToAddressType'
    """
    suffix_length = len(FOREIGN_KEY_ID_SUFFIX)
    if len(column_name) > suffix_length and column_name.lower().endswith(FOREIGN_KEY_ID_SUFFIX):
        return column_name[:-suffix_length]
    return column_name


def generate_class_name(schema_name: str, table_name: str, schema_qualified: bool,
                        default_schema: str) -> str:
    """
    Generate the entity class name of a table.

    The class name is the table name itself. When ``schema_qualified`` is set,
    tables outside the default schema are prefixed with their schema
    (``Sales_Customer``) so that same-named tables in different schemas do not
    clash.
    """
    if schema_qualified and schema_name and schema_name != default_schema:
        return f"{schema_name}_{table_name}"
    return table_name


class NamingConventions:
    """
    Naming conventions bound to one target language.

    This class provides consistent naming across the enricher components.
    """

    def __init__(self, language: TargetLanguage = CSHARP):
        self.language = language

    def column_to_property(self, column_name: str) -> str:
        """Convert a column name to a candidate property identifier."""
        return clean_identifier(column_name, self.language)

    def foreign_key_to_navigation(self, column_name: str) -> str:
        """Strip the Id suffix of a foreign-key column; the casing of the column is kept."""
        return sanitize_identifier(strip_id_suffix(column_name), self.language)

    def class_to_reverse_navigation(self, class_name: str) -> str:
        """Reverse navigations are named after the child class, without pluralization."""
        return self.language.escape(class_name)
