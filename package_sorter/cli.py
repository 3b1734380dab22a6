"""
Package Sorter CLI - classify one package from the command line.

Usage:
    package-sorter "50,30,20,5000"             # prints STANDARD
    package-sorter "150,30,20,25000"           # prints REJECTED
    package-sorter --details "150,30,20,5000"  # prints the full result as JSON
    package-sorter -- "-5,30,20,5000"          # values starting with "-" need "--"
    package-sorter --help

Exit status:
    0  classified
    1  malformed input or invalid package
    2  missing argument / unknown option (argparse)
"""

import argparse
import json
import logging
import re
import sys
from typing import List, Optional, Tuple

from package_sorter.config import settings
from package_sorter.exceptions import ValidationError
from package_sorter.logging_config import setup_logging
from package_sorter.schemas.package import ClassificationResponse
from package_sorter.services.classifier import (
    BULKY_VOLUME_LIMIT_CM3,
    DIMENSION_LIMIT_CM,
    HEAVY_MASS_LIMIT_G,
    classifier_service,
)

logger = logging.getLogger(__name__)

PROG = "package-sorter"

EPILOG = f"""\
PARAMETERS:
  width  - Package width in centimeters (positive integer)
  height - Package height in centimeters (positive integer)
  length - Package length in centimeters (positive integer)
  mass   - Package mass in grams (positive number)

OUTPUT:
  STANDARD - Normal processing (not bulky, not heavy)
  SPECIAL  - Special handling (bulky OR heavy, but not both)
  REJECTED - Cannot process (both bulky AND heavy)

CLASSIFICATION RULES:
  BULKY: Any dimension >= {DIMENSION_LIMIT_CM}cm OR volume >= {BULKY_VOLUME_LIMIT_CM3:,} cm³
  HEAVY: Mass >= {HEAVY_MASS_LIMIT_G:,} grams

EXAMPLES:
  "50,30,20,5000"      -> STANDARD (normal size and weight)
  "150,30,20,5000"     -> SPECIAL  (bulky by dimension)
  "50,30,20,25000"     -> SPECIAL  (heavy package)
  "150,30,20,25000"    -> REJECTED (both bulky and heavy)
  "100,100,100,15000"  -> SPECIAL  (bulky by volume: 1M cm³)
"""


class InputFormatError(ValueError):
    """The argument is not four comma-separated numbers."""


# plain ASCII decimal literals: no digit separators, no non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:nan|inf|infinity)",
    re.ASCII | re.IGNORECASE,
)


def parse_measurements(raw: str) -> Tuple[int, int, int, float]:
    """
    Split "width,height,length,mass" into numbers.

    Only the shape and number syntax are checked here; positivity and
    finiteness are the package builder's job.
    """
    if raw is None or not raw.strip():
        raise InputFormatError("Input cannot be empty")

    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 4:
        raise InputFormatError(
            "Input must have exactly 4 comma-separated values: width,height,length,mass"
        )

    names = ("width", "height", "length")
    dimensions = []
    for name, part in zip(names, parts[:3]):
        if not _INTEGER_RE.fullmatch(part):
            raise InputFormatError(f"{name} must be an integer, got {part!r}")
        dimensions.append(int(part))

    if not _NUMBER_RE.fullmatch(parts[3]):
        raise InputFormatError(f"mass must be a number, got {parts[3]!r}")
    mass = float(parts[3])

    width, height, length = dimensions
    return width, height, length, mass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Classifies packages and determines their stack assignment based on "
            "dimensions and weight."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "measurements",
        metavar="width,height,length,mass",
        help='Comma-separated measurements, e.g. "50,30,20,5000"',
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Print the full classification (flags, remarks, volume) as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Override LOG_LEVEL for this run (logs go to stderr)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # stderr keeps stdout clean for scripts that capture the decision
    setup_logging(level=args.log_level or settings.log_level, stream=sys.stderr)

    try:
        width, height, length, mass = parse_measurements(args.measurements)
        result = classifier_service.evaluate(width, height, length, mass)
    except (InputFormatError, ValidationError) as e:
        logger.debug("Rejected input %r: %s", args.measurements, e)
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.details:
        details = ClassificationResponse.from_result(result).model_dump(mode="json", exclude={"timestamp"})
        print(json.dumps(details, indent=2, ensure_ascii=False))
    else:
        print(result.decision.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
