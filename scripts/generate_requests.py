#!/usr/bin/env python3
"""Generate a sample request file for manual runs.

Writes whitespace-delimited ``ssn first last email`` records, mixing
valid requests with ones that break a single field rule.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_intake.generators.request import RequestGenerator
from bank_intake.logging import get_logger, setup_logging
from bank_intake.sources.requests import write_requests

logger = get_logger(__name__)


def main() -> None:
    """Generate the request file."""
    parser = argparse.ArgumentParser(description="Generate sample account requests")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("requests.txt"),
        help="Request file to write (default: requests.txt)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=50,
        help="Number of requests to generate (default: 50)",
    )
    parser.add_argument(
        "--invalid-rate",
        type=float,
        default=0.2,
        help="Share of requests with a broken field (default: 0.2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    args = parser.parse_args()

    setup_logging()
    generator = RequestGenerator(seed=args.seed)
    count = write_requests(args.output, generator.generate_batch(args.count, args.invalid_rate))
    logger.info("Saved %d requests to %s", count, args.output)


if __name__ == "__main__":
    main()
