"""CLI for checking the currency rates file outside of Lambda."""

from __future__ import annotations

import dataclasses
import sys

from dotenv import load_dotenv

from check_currency_rates.check_currency_rates import check_currency_rates_file
from check_currency_rates.helpers import load_config, parse_check_currency_rates_args
from common.aws import LoggingMailSender, MailSender, ObjectFetcher
from common.cli_helpers import setup_logging

load_dotenv()


def main(argv: list[str] | None = None) -> int:
    args = parse_check_currency_rates_args(argv)
    config = load_config()

    overrides = {}
    if args.bucket:
        overrides["bucket"] = args.bucket
    if args.filename:
        overrides["filename"] = args.filename
    if args.stale_older_than_days is not None:
        overrides["stale_older_than_days"] = args.stale_older_than_days
    config = dataclasses.replace(config, **overrides)

    setup_logging(config.debug)

    mailer = LoggingMailSender() if args.dry_run else MailSender()
    result = check_currency_rates_file(config, ObjectFetcher(), mailer)
    if args.dry_run:
        # printed so the would-be alert shows even when DEBUG silences info logs
        for params in mailer.sent:
            print(
                f"Dry run, would email {', '.join(params['Destination']['ToAddresses'])}: "
                f"{params['Message']['Subject']['Data']}"
            )
    if result is None:
        return 1
    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
