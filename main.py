#!/usr/bin/env python3
"""
Invoice Scanner - Main Entry Point.

Extracts vendor name, invoice number, date and total amount from OCR
result documents (or plain text) and writes the results as JSON.

Usage:
    Command Line:
        python main.py --input invoice_ocr.json --output results.json
        python main.py --input ./ocr_results/ --output ./outputs/

    Python:
        from main import run_scan
        results = run_scan(["invoice_ocr.json"])

Version: 1.0.0
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from src.utils.logger import setup_logger_from_config, get_logger, ROOT_LOGGER_NAME
from src.utils.exceptions import InvoiceScanError


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Heuristic invoice field extraction from OCR results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Scan a single OCR result:
        python main.py --input invoice_ocr.json --output results.json

    Scan a directory of OCR results and text files:
        python main.py --input ./ocr_results/ --output ./outputs/
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Input file or directory (.json OCR results, .txt text)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output JSON file or directory (default: outputs/scan_results.json)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Load configuration and set up logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    if args.config:
        ConfigurationManager.reset()
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = None

    if level is not None:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)

    logger.info("=" * 60)
    logger.info("INVOICE SCANNER")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Input: {args.input}")
    logger.info(f"Output: {args.output or 'default'}")

    return config


def validate_inputs(args: argparse.Namespace) -> List[Path]:
    """
    Validate the input path and return the files to scan.

    Raises:
        InputError: If the input path is missing, unsupported or empty.
    """
    from src.input_handler import InputHandler

    logger = get_logger(__name__)
    input_path = Path(args.input)
    handler = InputHandler()

    if input_path.is_dir():
        files = handler.find_files(input_path)
        if not files:
            logger.warning(f"No supported files found in: {input_path}")
        else:
            logger.info(f"Found {len(files)} files to scan")
        return files

    return [handler.validate_file(input_path)]


def run_scan(input_files: List[Path], output_path: Optional[str] = None) -> List[dict]:
    """
    Scan files and write the results.

    Args:
        input_files: Files to scan.
        output_path: Output file or directory; configured default if None.

    Returns:
        List of scan result dictionaries.

    Raises:
        ResultExportError: If the results cannot be written.

    Example:
        >>> results = run_scan([Path("invoice_ocr.json")], "outputs/")
        >>> results[0]['invoice_number']
        '4521'
    """
    from src.pipeline import InvoiceScanner
    from src.output_handler import OutputHandler

    logger = get_logger(__name__)

    scanner = InvoiceScanner()
    output_handler = OutputHandler()

    results = scanner.scan_files(input_files)

    for result in results:
        if not result.success:
            logger.error(f"  {result.source_file}: {'; '.join(result.errors)}")
            continue

        record = result.record
        logger.info(
            f"  {result.source_file}: vendor={record.vendor_name} | "
            f"number={record.invoice_number} | date={record.date} | "
            f"total={record.total_amount:.2f} {record.currency}"
        )

    if results:
        output_handler.save(results, output_path)

    return [result.to_dict() for result in results]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for command-line execution.

    Returns:
        Exit code (0 success, 1 input or usage error, 130 interrupted).
    """
    try:
        args = parse_arguments(argv)

        initialize_system(args)
        logger = get_logger(__name__)

        input_files = validate_inputs(args)

        if not input_files:
            logger.error("No files to scan")
            return 1

        results = run_scan(input_files, args.output)

        failed = sum(1 for r in results if not r['success'])
        logger.info("=" * 60)
        logger.info(f"Scan complete. Processed {len(results)} files ({failed} failed).")
        logger.info("=" * 60)

        return 0

    except InvoiceScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except FileNotFoundError as e:
        # Missing --config file
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
