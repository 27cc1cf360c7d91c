"""Helper functions for the check_currency_rates job."""

from __future__ import annotations

import argparse
import logging
import math
import os
from collections.abc import Mapping

from check_currency_rates.models import AlerterConfig

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = "currency.prebid.org"
DEFAULT_FILENAME = "latest.json"
DEFAULT_ALERT_FROM = "alerts@prebid.org"
DEFAULT_ALERT_TO = "alerts@prebid.org"
DEFAULT_ALERT_SUBJECT = "ALERT: Prebid Currency Rates File Monitor"
DEFAULT_STALE_OLDER_THAN_DAYS = 2.0
DEFAULT_GENERATOR_LOGS_URL = (
    "https://console.aws.amazon.com/cloudwatch/home?region=us-east-1"
    "#logStream:group=/aws/lambda/prebidCurrencyRatesFileGenerator;"
    "streamFilter=typeLogStreamPrefix"
)


def _get(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name) or default


def parse_debug(value: str | None) -> bool:
    '''DEBUG defaults to on; once set, only "1" keeps it on.'''
    if value is None:
        return True
    return value == "1"


def parse_stale_older_than_days(value: str | None) -> float:
    '''Parse STALE_OLDER_THAN_DAYS, falling back to the default when unusable.'''
    if not value:
        return DEFAULT_STALE_OLDER_THAN_DAYS
    try:
        days = float(value)
    except ValueError:
        logger.warning("Ignoring invalid STALE_OLDER_THAN_DAYS: %s", value)
        return DEFAULT_STALE_OLDER_THAN_DAYS
    if not math.isfinite(days) or days <= 0:
        logger.warning("Ignoring invalid STALE_OLDER_THAN_DAYS: %s", value)
        return DEFAULT_STALE_OLDER_THAN_DAYS
    return days


def load_config(environ: Mapping[str, str] | None = None) -> AlerterConfig:
    """Resolve the alerter configuration from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ).

    Returns:
        AlerterConfig with every unset or empty value replaced by its default.
    """
    if environ is None:
        environ = os.environ

    return AlerterConfig(
        bucket=_get(environ, "S3_BUCKET", DEFAULT_BUCKET),
        filename=_get(environ, "S3_FILENAME", DEFAULT_FILENAME),
        alert_from=_get(environ, "ALERT_FROM", DEFAULT_ALERT_FROM),
        alert_to=_get(environ, "ALERT_TO", DEFAULT_ALERT_TO),
        alert_subject=_get(environ, "ALERT_SUBJECT", DEFAULT_ALERT_SUBJECT),
        stale_older_than_days=parse_stale_older_than_days(environ.get("STALE_OLDER_THAN_DAYS")),
        debug=parse_debug(environ.get("DEBUG")),
        generator_logs_url=_get(environ, "GENERATOR_LOGS_URL", DEFAULT_GENERATOR_LOGS_URL),
    )


def positive_float(value: str) -> float:
    try:
        days = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a number") from exc
    if not math.isfinite(days) or days <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return days


def parse_check_currency_rates_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for check_currency_rates.'''

    parser = argparse.ArgumentParser(
        description="Alert when the currency rates file in S3 is stale.",
    )
    parser.add_argument("--bucket", default=None, help="Overrides S3_BUCKET.")
    parser.add_argument("--filename", default=None, help="Overrides S3_FILENAME.")
    parser.add_argument(
        "--stale-older-than-days",
        type=positive_float,
        default=None,
        help="Overrides STALE_OLDER_THAN_DAYS.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the alert instead of sending it.",
    )
    return parser.parse_args(argv)
