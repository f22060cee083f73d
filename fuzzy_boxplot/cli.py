"""
Box-Plot Report CLI

Builds a box plot from ``ID=VALUE`` pairs given on the command line and
prints its statistics and band membership.

Usage:
    boxplot-report a=1 b=2 c=3 d=4 e=5
    boxplot-report a=1 b=2 c=3 d=4 e=40 --fuzziness 5 --name LOC
    boxplot-report a=1 b=2 c=3 d=4 e=5 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Tuple

from fuzzy_boxplot.config.settings import Settings
from fuzzy_boxplot.domain.exceptions import BoxPlotError
from fuzzy_boxplot.domain.services.boxplot import BoxPlot


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def parse_sample(text: str) -> Tuple[str, float]:
    """Parse one ``ID=VALUE`` argument."""
    entry_id, sep, raw = text.rpartition("=")
    if not sep or not entry_id:
        raise argparse.ArgumentTypeError(f"expected ID=VALUE, got '{text}'")
    try:
        return entry_id, float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value of '{entry_id}' is not a number: '{raw}'")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxplot-report",
        description="Tukey box-plot statistics with fuzzy value bands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s a=1 b=2 c=3 d=4 e=5                 Report with no fuzziness
  %(prog)s a=1 b=2 c=3 d=4 e=40 -f 5           5%% of the range as tolerance
  %(prog)s a=1 b=2 c=3 d=4 e=5 --json          Print statistics as JSON
""",
    )
    parser.add_argument(
        "samples",
        nargs="+",
        type=parse_sample,
        metavar="ID=VALUE",
        help="Sample identifier and numeric value",
    )
    parser.add_argument("--name", "-n", default="samples", help="Box plot name")
    parser.add_argument(
        "--fuzziness", "-f",
        type=float,
        default=settings.default_fuzziness,
        help=f"Tolerance as a percentage of the value range (default: {settings.default_fuzziness})",
    )

    output = parser.add_argument_group("Output")
    output.add_argument("--json", action="store_true", help="Print results as JSON to stdout")
    verbosity = output.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")

    return parser


# ---------------------------------------------------------------------------
# Output Helpers
# ---------------------------------------------------------------------------

def build_result(box: BoxPlot) -> Dict:
    return {
        "name": box.get_name(),
        "statistics": box.statistics().to_dict(),
        "bands": {
            band.value: sorted(members)
            for band, members in box.classify().items()
        },
    }


def format_bands(box: BoxPlot) -> str:
    lines = ["Bands:"]
    for band, members in box.classify().items():
        names = ", ".join(sorted(members)) or "-"
        lines.append(f"  {band.label:13s}: {names}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    log_level = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet
        else getattr(logging, settings.log_level, logging.INFO)
    )
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        box = BoxPlot(args.name, padding_key=settings.padding_key)
        box.init(dict(args.samples), args.fuzziness)

        if args.json:
            print(json.dumps(build_result(box), indent=2))
        else:
            print(box.to_report())
            print(format_bands(box))
        return 0

    except BoxPlotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if args.verbose:
            logging.exception("Box plot failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
