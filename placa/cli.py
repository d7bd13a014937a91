"""
Placa Command Line

Read a plate from an image file, or validate/extract plates from text.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from placa.config import PlacaConfig
from placa.exceptions import PlacaError
from placa.plates.extract import extract_plate_from_text
from placa.reader import PlateReader


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_read(args, reader: PlateReader) -> int:
    try:
        with open(args.image, 'rb') as f:
            image = f.read()
    except OSError as e:
        print(f"Error: Cannot read image: {e}", file=sys.stderr)
        return 1

    try:
        if args.provider:
            result = reader.get_provider(args.provider).read_plate(image)
        else:
            result = reader.read_plate(image)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    except PlacaError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    _print_json(result.to_dict())
    return 0


def cmd_validate(args, reader: PlateReader) -> int:
    _print_json(reader.validate_plate(args.text))
    return 0


def cmd_extract(args, reader: PlateReader) -> int:
    plate = extract_plate_from_text(args.text)
    if plate is None:
        return 1
    print(plate)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='placa', description='Brazilian license plate reader')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    read_parser = subparsers.add_parser('read', help='Read a plate from an image file')
    read_parser.add_argument('image', help='Path to the image file')
    read_parser.add_argument(
        '--provider',
        choices=['plate_recognizer', 'ocr_space', 'openai_vision'],
        help='Use a single provider instead of the fallback chain'
    )
    read_parser.set_defaults(func=cmd_read)

    validate_parser = subparsers.add_parser('validate', help='Validate a typed plate')
    validate_parser.add_argument('text', help='Plate text, e.g. ABC-1234')
    validate_parser.set_defaults(func=cmd_validate)

    extract_parser = subparsers.add_parser('extract', help='Extract a plate from OCR text')
    extract_parser.add_argument('text', help='Free text containing a plate')
    extract_parser.set_defaults(func=cmd_extract)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    try:
        config = PlacaConfig.from_env()
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    return args.func(args, PlateReader.from_config(config))


if __name__ == "__main__":
    sys.exit(main())
