"""
Schema Enricher.

Turns a physical database schema into a logical model with unique,
language-safe entity, property and navigation names and resolved types.
"""

__version__ = "0.1.0"
