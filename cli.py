"""
OverlayKit CLI - compute chart overlay indicators from exported price data.

Usage:
    overlaykit list
    overlaykit validate --input FILE
    overlaykit compute --input FILE --type TYPE [--period N] [--param KEY=VALUE ...]
                       [--format FORMAT] [--output FILE]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from adapters import CsvPriceSource
from config import ConfigError, OverlayKitConfig, load_config
from domain import IndicatorError, OverlayType, PriceSeries
from domain.overlays import OverlaySpec, compute_overlay, default_parameters
from ports import SourceError
from presentation import overlay_to_csv, overlay_to_json_text

logger = logging.getLogger(__name__)


def parse_param(text: str) -> tuple[str, Any]:
    """Parse a KEY=VALUE option, converting the value to int or float."""
    key, sep, raw = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    raw = raw.strip()
    try:
        return key, int(raw)
    except ValueError:
        pass
    try:
        return key, float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value for {key} must be a number, got {raw!r}")


def setup_logging(config: OverlayKitConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def cmd_list(args: argparse.Namespace, config: OverlayKitConfig) -> int:
    """Show overlay types and their default parameters."""
    for overlay_type in OverlayType:
        params = default_parameters(overlay_type, config.indicators)
        described = ", ".join(f"{k}={v}" for k, v in params.items()) or "-"
        print(f"{overlay_type.value:<12} {described}")
    return 0


def cmd_validate(args: argparse.Namespace, config: OverlayKitConfig) -> int:
    """Report bars that violate OHLC invariants."""
    source = CsvPriceSource(args.input, date_format=args.date_format, validate=False)
    invalid = source.invalid_rows()

    for row, bar in invalid:
        print(f"row {row}: {'; '.join(bar.validation_errors())}")

    if invalid:
        print(f"{len(invalid)} invalid bar(s) in {args.input}", file=sys.stderr)
        return 1

    print(f"OK: {args.input}", file=sys.stderr)
    return 0


def cmd_compute(args: argparse.Namespace, config: OverlayKitConfig) -> int:
    """Compute an overlay and write it out."""
    source = CsvPriceSource(args.input, date_format=args.date_format)
    prices = PriceSeries.from_bars(source.load())

    spec = OverlaySpec(
        type=args.type,
        name=args.name,
        period=args.period,
        parameters=dict(args.param or []),
    )
    result = compute_overlay(spec, prices, config.indicators)

    dates = prices.dates if any(d is not None for d in prices.dates) else None
    precision = config.export.float_precision
    date_format = config.export.date_format

    if args.format == "json":
        output = overlay_to_json_text(result, dates, precision, date_format) + "\n"
    else:
        output = overlay_to_csv(
            result, dates, precision, date_format, include_header=not args.no_header
        )

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"{result.name} written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="overlaykit",
        description="Technical indicator overlays for price charts",
    )
    parser.add_argument("--config", help="Path to TOML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # List command
    list_parser = subparsers.add_parser("list", help="Show overlay types and defaults")
    list_parser.set_defaults(func=cmd_list)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check bars in a CSV file")
    validate_parser.add_argument("-i", "--input", required=True, help="Input CSV file")
    validate_parser.add_argument("--date-format", help="strptime format for the date column")
    validate_parser.set_defaults(func=cmd_validate)

    # Compute command
    compute_parser = subparsers.add_parser("compute", help="Compute an overlay")
    compute_parser.add_argument("-i", "--input", required=True, help="Input CSV file")
    compute_parser.add_argument(
        "-t", "--type",
        required=True,
        choices=[t.value for t in OverlayType],
        help="Overlay type",
    )
    compute_parser.add_argument("-p", "--period", type=int, help="Main period")
    compute_parser.add_argument(
        "--param",
        type=parse_param,
        action="append",
        metavar="KEY=VALUE",
        help="Extra indicator parameter (repeatable)",
    )
    compute_parser.add_argument("-n", "--name", help="Overlay name used in headers")
    compute_parser.add_argument(
        "-f", "--format",
        choices=["csv", "json"],
        default="csv",
        help="Output format",
    )
    compute_parser.add_argument("-o", "--output", help="Output file path")
    compute_parser.add_argument("--no-header", action="store_true", help="Omit CSV header")
    compute_parser.add_argument("--date-format", help="strptime format for the date column")
    compute_parser.set_defaults(func=cmd_compute)

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config, args.verbose)

    try:
        return args.func(args, config)
    except (IndicatorError, SourceError) as e:
        logger.debug(f"Command failed: {e.to_dict()}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
