"""
Enrichment report for Schema Enricher.

The report is a plain dictionary describing the enriched model (identifiers,
type decisions, facets and navigations of every included table). It is what
the command line tool prints, and it is handy for reviewing how a schema
change affects generated names.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from schema_enricher.enricher import EnrichmentResult


def build_report(result: EnrichmentResult, extension: str = "",
                 with_attributes: bool = False) -> Dict[str, Any]:
    """
    Build the report of an enrichment run.

    Args:
        result: Enrichment result
        extension: File extension of the target language, used for entity file names
        with_attributes: Whether entities are configured with attributes

    Returns:
        Report dictionary with a ``summary`` and one entry per included table
    """
    tables = []
    for table in result.schema.included_tables:
        entry = table.to_dict()
        entry['file_name'] = table.file_name(extension)
        entry['navigations'] = [
            dict(fk.to_dict(), client_set_null=fk.client_set_null(with_attributes))
            for fk in table.navigations()
        ]
        entry['configuration_order'] = [
            column.property_name for column in table.columns_in_configuration_order()
        ]
        tables.append(entry)

    return {
        'summary': result.to_dict(),
        'tables': tables,
    }


def dump_report(report: Dict[str, Any], output_file: Optional[Union[str, Path]] = None) -> str:
    """Serialize the report as YAML, writing it to ``output_file`` when given."""
    text = yaml.safe_dump(report, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return text
