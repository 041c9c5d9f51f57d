import argparse
import json
import logging
import os
import sys

from .io import load_adjustment_config, load_cma_from_dict, read_payload, write_report_json
from .report import build_report


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="cma_analytics",
        description="Comparable statistics, smart defaults and adjustments for a CMA payload",
    )
    parser.add_argument(
        "payload",
        help="JSON file with 'subject' and 'comparables'",
    )
    parser.add_argument(
        "--stats-only",
        action="store_true",
        help="Skip the adjustment grid",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write the report to this path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, etc.); defaults to $CMA_LOG_LEVEL or WARNING",
    )
    args = parser.parse_args(argv)

    level = (args.log_level or os.environ.get("CMA_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("cma_analytics")

    try:
        data = read_payload(args.payload)
        subject, comps = load_cma_from_dict(data)
        rates, overrides = load_adjustment_config(data)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("loaded %d comparables (subject: %s)", len(comps), "yes" if subject else "no")
    report = build_report(subject, comps, rates=rates, overrides=overrides, stats_only=args.stats_only)

    if args.out:
        path = write_report_json(report, args.out)
        logger.info("wrote %s", path)
    else:
        print(json.dumps(report, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
