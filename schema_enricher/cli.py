import argparse
import logging
import sys

from schema_enricher.config_validation import load_config
from schema_enricher.enricher import SchemaEnricher
from schema_enricher.exceptions import ConfigurationError, SchemaEnricherError
from schema_enricher.loader import load_physical_schema
from schema_enricher.report import build_report, dump_report

from schema_enricher.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_step,
    log_section,
    log_summary
)

# Note: Colored logging will be configured after parsing args
logger = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enrich a database schema with unique, language-safe entity, "
        "property and navigation names."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-s",
        "--schema-file",
        dest="schema_file",
        help="Physical schema JSON file. Overrides config file setting.",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        dest="output_file",
        help="Write the enrichment report here instead of stdout.",
    )
    parser.add_argument(
        "-l",
        "--target-language",
        dest="target_language",
        choices=["csharp", "python"],
        help="Language whose reserved keywords must be escaped.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)

    global logger
    logger = get_colored_logger(__name__)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    # Only the options that map onto configuration keys
    config_args = argparse.Namespace(
        schema_file=args.schema_file,
        output_file=args.output_file,
        target_language=args.target_language,
    )

    # --- Main Execution Pipeline ---
    try:
        # 1. Load Configuration
        log_step(logger, "Loading configuration...")
        config = load_config(args.config, config_args)
        if not config.schema_file:
            raise ConfigurationError(
                "No physical schema file given",
                config_file=args.config,
                suggestions=["Pass --schema-file or set 'schema_file' in the config file"],
            )

        # 2. Load the physical schema
        log_section(logger, "Schema Loading")
        log_step(logger, f"Loading physical schema from {config.schema_file}...")
        physical = load_physical_schema(config.schema_file)
        if not physical.tables:
            logger.warning("The schema does not contain any tables. Exiting.")
            sys.exit(0)

        # 3. Enrich
        log_section(logger, "Schema Enrichment")
        result = SchemaEnricher(config).enrich(physical)
        log_success(
            logger,
            f"Enrichment complete: {len(result.schema.included_tables)} entities, "
            f"{result.named_relationships} relationships named."
        )
        log_summary(logger, result.to_dict())

        # 4. Report
        report = build_report(result, config.language.file_extension, config.with_attributes)
        text = dump_report(report, config.output_file)
        if config.output_file:
            log_success(logger, f"Report written to {config.output_file}")
        else:
            sys.stdout.write(text)

        if result.has_errors:
            sys.exit(1)

    # --- Error Handling ---
    except SchemaEnricherError as e:
        logger.error(str(e), exc_info=args.verbose)
        sys.exit(1)
    except OSError as e:
        logger.error(f"I/O Error: {e}", exc_info=args.verbose)
        sys.exit(1)


# --- Script Entry Point ---
if __name__ == "__main__":
    main()
