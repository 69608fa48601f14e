from __future__ import annotations

import argparse
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from valuetypes.app import build_repository, lookup_by_barcode, lookup_by_description
from valuetypes.common.result import Err, Ok
from valuetypes.config import AppConfig, ConfigurationError, configure_logging
from valuetypes.domain.errors import CatalogError, ValidationError
from valuetypes.domain.model import barcode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from valuetypes.domain.model import Product


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate barcodes and look up products")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate a barcode")
    check.add_argument("code", type=str, help="Barcode such as 8-000137-001620")

    find = subparsers.add_parser("find", help="Look up products")
    key = find.add_mutually_exclusive_group(required=True)
    key.add_argument("--barcode", type=str, help="Barcode to look up")
    key.add_argument("--description", type=str, help="Exact description to look up")
    find.add_argument(
        "--catalog",
        type=Path,
        help="JSON catalogue file (defaults to $VALUETYPES_CATALOG, then the sample data)",
    )

    return parser.parse_args(list(argv))


def _print_products(products: Sequence[Product]) -> None:
    for product in products:
        print(f"{product.barcode}\t{product.description}")


def _check(raw: str) -> None:
    match barcode.make(raw):
        case Ok(value=code):
            print(f"{code} is a valid barcode (country code {barcode.country_code(code)})")
        case Err(error=error):
            print(f"Error: {error}", file=sys.stderr)
            sys.exit(2)


def _find(args: argparse.Namespace, config: AppConfig) -> None:
    catalog_path: Path | None = args.catalog or config.catalog_path
    repository = build_repository(catalog_path)
    if args.barcode is not None:
        found = lookup_by_barcode(args.barcode, repository=repository)
        products = [] if found is None else [found]
    else:
        products = lookup_by_description(args.description, repository=repository)
    if not products:
        print("No products found", file=sys.stderr)
        sys.exit(1)
    _print_products(products)


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    try:
        config = AppConfig.from_environment()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(level=config.log_level)

    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        if args.command == "check":
            _check(args.code)
        else:
            _find(args, config)
    except (ValidationError, CatalogError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
