#!/usr/bin/env python3
"""Main entry point for Amiibo BIN to Flipper NFC conversion."""

import logging
import argparse
import os
import sys
from pathlib import Path
from typing import Dict

from src.amiibo.constants import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR
from src.amiibo.document import convert_dump
from src.amiibo.exceptions import AmiiboError
from src.utils.files import find_dump_files, load_dump, output_path_for, save_nfc_file
from src.utils.logging import setup_logging


def convert_file(path, input_dir, output_dir) -> Path:
    """Convert a single dump file and return the written NFC path."""
    content = convert_dump(load_dump(path))
    output_path = output_path_for(path, input_dir, output_dir)
    save_nfc_file(output_path, content)
    return output_path


def convert_directory(input_dir, output_dir) -> Dict[str, int]:
    """Convert every dump under input_dir, continuing past per-file failures."""
    summary = {
        'total': 0,
        'success': 0,
        'failed': 0
    }

    files = find_dump_files(input_dir)
    if not files:
        logging.warning(f"No dump files found in {input_dir}")
        return summary

    summary['total'] = len(files)
    logging.info(f"Processing {len(files)} files")

    for path in files:
        logging.info(f"Process file: {path}")
        try:
            output_path = convert_file(path, input_dir, output_dir)
            logging.debug(f"    Written: {output_path}")
            summary['success'] += 1
        except AmiiboError as e:
            logging.error(f"Conversion failed: {e}")
            summary['failed'] += 1

    return summary


def create_parser():
    """Create argument parser."""
    parser = argparse.ArgumentParser(description='Convert Amiibo BIN dumps to Flipper NFC files')
    parser.add_argument('--input', '-i', default=DEFAULT_INPUT_DIR,
                        help=f'Input path (default: {DEFAULT_INPUT_DIR})')
    parser.add_argument('--output', '-o', default=DEFAULT_OUTPUT_DIR,
                        help=f'Path for converted files (default: {DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug output on the console')
    return parser


def validate_args(args):
    """Validate command line arguments."""
    if not os.path.isdir(args.input):
        return False, f"Input directory not found: {args.input}"

    return True, ""


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    # Validate arguments before setting up logging
    valid, error = validate_args(args)
    if not valid:
        if error:
            print(f"Error: {error}")
        parser.print_help()
        return 1

    setup_logging(args.output, verbose=args.verbose)

    try:
        summary = convert_directory(args.input, args.output)
    except AmiiboError as e:
        logging.error(f"Operation failed: {e}")
        return 1

    logging.info("\nConversion Summary:")
    logging.info(f"Total files: {summary['total']}")
    logging.info(f"Converted: {summary['success']}")
    logging.info(f"Failed: {summary['failed']}")

    return 1 if summary['failed'] else 0


if __name__ == "__main__":
    sys.exit(main())
