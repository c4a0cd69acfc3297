#!/usr/bin/env python3
"""
billscan - Command-line entry point.

Runs the invoice field extraction engine on OCR text dumps and prints
the extracted fields as JSON.

Usage:
    Command Line:
        python main.py --input receipt.txt
        python main.py --input ./samples/ --output results.json
        python main.py --input receipt.json --form --debug

    Python:
        from main import run_extraction
        results = run_extraction("samples/")
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import ConfigurationManager
from billscan.input_handler import InputHandler
from billscan.model_inference import InvoiceFieldExtractor
from billscan.utils.exceptions import BillScanError
from billscan.utils.helpers import ensure_directory
from billscan.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger_from_config


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract amount, date and provider from invoice OCR text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Single dump:
        python main.py --input receipt.txt

    Directory, results to a file:
        python main.py --input ./samples/ --output results.json
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="OCR dump (.txt/.json) or directory of dumps"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write all results as a JSON list to this file instead of stdout"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--locale", "-l",
        type=str,
        default=None,
        help="Extraction locale (default: extraction.locale from configuration)"
    )

    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Search input directory recursively"
    )

    parser.add_argument(
        "--form",
        action="store_true",
        help="Output bill form values instead of the full result"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (strategy traces)"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Load configuration and set up logging.

    Raises:
        ConfigurationError: If the configuration file is missing or invalid.
    """
    config = ConfigurationManager(args.config)
    logger = setup_logger_from_config()

    if args.debug:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.ERROR)

    logger.info(f"billscan {config.get('project.version', '1.0.0')} | input: {args.input}")
    return config


def collect_inputs(handler: InputHandler, input_path: str, recursive: bool = False) -> List[Path]:
    """
    Resolve the input argument to a list of dump files.

    Raises:
        DocumentNotFoundError: If the input path does not exist.
    """
    path = Path(input_path)

    if path.is_dir():
        return handler.list_files(path, recursive=recursive)

    return [handler.validate_file(path)]


def run_extraction(
    input_path: str,
    output_path: Optional[str] = None,
    config_path: Optional[str] = None,
    locale: Optional[str] = None,
    recursive: bool = False,
    form: bool = False
) -> List[Dict[str, Any]]:
    """
    Run extraction over one dump or a directory of dumps.

    Files that cannot be loaded are logged and skipped.

    Args:
        input_path: Dump file or directory.
        output_path: Optional JSON file receiving all results.
        config_path: Optional custom configuration file.
        locale: Optional locale name overriding configuration.
        recursive: Whether to search subdirectories.
        form: Return form values instead of full results.

    Returns:
        One dictionary per successfully processed file.
    """
    logger = get_logger(__name__)

    ConfigurationManager(config_path)
    handler = InputHandler()
    extractor = InvoiceFieldExtractor(locale)
    logger.debug(f"Extractor: {extractor.get_extractor_info()}")

    files = collect_inputs(handler, input_path, recursive)
    results = []

    for file_path in files:
        try:
            document = handler.load(file_path)
        except BillScanError as e:
            logger.error(f"Skipping {file_path.name}: {e}")
            continue

        result = extractor.extract(document)
        logger.info(
            f"{file_path.name}: amount={result.amount}, "
            f"date={result.invoice_date}, provider={result.provider_name!r}"
        )

        if form:
            entry = {'source': file_path.name, **result.to_form_fields()}
        else:
            entry = result.to_dict()
        results.append(entry)

    if output_path:
        out = Path(output_path)
        ensure_directory(out.parent)
        out.write_text(json.dumps(results, indent=2, ensure_ascii=False), encoding='utf-8')
        logger.info(f"Wrote {len(results)} results to {out}")

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line execution.

    Returns:
        Exit code (0 success, 1 input/configuration error, 130 interrupted).
    """
    try:
        args = parse_arguments(argv)
        initialize_system(args)

        results = run_extraction(
            input_path=args.input,
            output_path=args.output,
            config_path=args.config,
            locale=args.locale,
            recursive=args.recursive,
            form=args.form
        )

        if not args.output:
            print(json.dumps(results, indent=2, ensure_ascii=False))

        return 0

    except BillScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
