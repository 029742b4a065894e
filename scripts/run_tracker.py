#!/usr/bin/env python3
"""
Run an interactive fuel & performance tracker session.

Usage:
    python scripts/run_tracker.py
    python scripts/run_tracker.py --company "Acme Freight"
    python scripts/run_tracker.py --json --log-level INFO
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fueltrack.config import load_config
from fueltrack.exceptions import InvalidInputError
from fueltrack.session import SessionRunner

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Track a driver's weekly fuel expenses and print an audit report"
    )
    parser.add_argument(
        "--company",
        type=str,
        help="Company name shown on the report (default: FUELTRACK_COMPANY_NAME or Codac Logistics)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level written to stderr (default: FUELTRACK_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the report as JSON"
    )

    args = parser.parse_args()

    try:
        config = load_config(company_name=args.company, log_level=args.log_level)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    runner = SessionRunner(config=config)

    try:
        session, summary = runner.run()
    except InvalidInputError as e:
        logger.error(f"Session aborted: {e}")
        return 1
    except EOFError:
        logger.error("Session aborted: input ended before all values were entered")
        return 1

    if args.json:
        report = runner.reporter.generate_report_dict(session, summary)
        print(json.dumps(report, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
