"""Main entry point for the Adobe renewal tool.

Handles command-line argument parsing, loads configuration, and runs the
login and reservation steps once.
"""

import argparse
import math
import sys

from loguru import logger

from kmutnb.adobe_renew.config import Config
from kmutnb.adobe_renew.error import RenewError


def main(argv: list[str] | None = None) -> int:
    """Entry point.

    Parses arguments, initializes configuration and logging, and runs the
    renewal. Returns the process exit code.
    """
    parser = argparse.ArgumentParser(description="KMUTNB Adobe license renewal")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification (only for hosts with a broken certificate chain)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the computed expiry date and endpoints without sending requests",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: KMUTNB_TIMEOUT or 10)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="log",
        help="Directory for log files",
    )
    args = parser.parse_args(argv)
    if args.timeout is not None and not (math.isfinite(args.timeout) and args.timeout > 0):
        parser.error("--timeout must be positive")

    logger.add(f"{args.log_dir}/{{time}}.log", rotation="1 day")

    from kmutnb.adobe_renew.module.renewal import AdobeRenewal

    try:
        conf = Config().load()
        if args.insecure:
            conf.verify_tls = False
        if args.timeout is not None:
            conf.timeout = args.timeout
        conf.dry_run = args.dry_run

        AdobeRenewal(conf).start()
    except RenewError as e:
        logger.error(e)
        return e.exit_code
    return 0


def main_sync():
    """Console script wrapper that exits with the code returned by main."""
    sys.exit(main())


if __name__ == "__main__":
    main_sync()
