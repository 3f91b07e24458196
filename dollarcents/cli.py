#!/usr/bin/env python3

# Parses dollar amounts (from the command line and/or a file), prints each in
# canonical "[-]$D.CC" form, and totals them.

import argparse
import logging
import os
import sys
import time

from outdated import check_outdated

from dollarcents import ledger
from dollarcents import VERSION
from dollarcents.args import define_cli_args
from dollarcents.my_progress import determinate_progress_cli

logger = logging.getLogger(__name__)


def main(argv=None):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)

    parser = argparse.ArgumentParser(
        description="Parse, format and total dollar amounts.")
    define_cli_args(parser)
    args = parser.parse_args(argv)

    if args.version:
        print(f"dollarcents {VERSION}")
        sys.exit(0)

    if args.log_path:
        add_file_logging(root_logger, args.log_path)

    logger.debug(f"Running version {VERSION}")
    if args.check_outdated:
        maybe_warn_outdated()

    if not args.amounts and not args.amounts_file:
        logger.critical("One or more amounts, or --amounts_file, required.")
        sys.exit(1)

    results = ledger.parse_amounts(
        args.amounts, progress_label="Parsing args", file_lines=False)
    if args.amounts_file:
        try:
            from_file = ledger.read_amounts_file(
                args.amounts_file, progress_factory=determinate_progress_cli)
        except (OSError, UnicodeDecodeError) as e:
            logger.critical(f"Cannot read amounts file {args.amounts_file}: {e}")
            sys.exit(1)
        results.amounts.extend(from_file.amounts)
        results.errors.extend(from_file.errors)

    format_spec = f">{args.width}" if args.width > 0 else ""
    if not args.total_only:
        for amount in results.amounts:
            print(format(amount.value, format_spec))
    print(f"Total: {results.total():{format_spec}}")

    if not results.success:
        logger.warning(f"{len(results.errors)} amount(s) could not be parsed.")
        if args.strict:
            logger.critical("Exiting due to --strict.")
            sys.exit(1)


def add_file_logging(root_logger, log_directory):
    os.makedirs(log_directory, exist_ok=True)
    log_filename = os.path.join(
        log_directory, f'{time.strftime("%Y-%m-%d_%H-%M-%S")}.log'
    )
    file_handler = logging.FileHandler(log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG)
    return log_filename


def maybe_warn_outdated():
    try:
        is_outdated, latest_version = check_outdated("dollarcents", VERSION)
        if is_outdated:
            logger.warning(
                f"Version {latest_version} is available. Please update by running:\n"
                "pip3 install dollarcents --upgrade\n"
            )
    except ValueError:
        logger.error(f"Version {VERSION} is newer than PyPI version")


if __name__ == "__main__":
    main()
