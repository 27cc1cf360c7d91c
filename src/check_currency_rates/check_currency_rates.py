"""Check the currency rates file in S3 for staleness and email an alert."""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, Optional

from check_currency_rates.helpers import DEFAULT_GENERATOR_LOGS_URL
from check_currency_rates.models import AlerterConfig, AlertMessage, CheckResult, StalenessResult
from common.aws import AWS_ERRORS, aws_error_message
from common.datetime import days_difference, parse_datetime

logger = logging.getLogger(__name__)

FETCH_ERROR_PREFIX = "Error reading currency rates file from S3: "


def create_get_object_params(bucket: str, key: str) -> Optional[dict[str, str]]:
    """Build the S3 GetObject request, or None if bucket or key is missing."""
    if not bucket or not key:
        logger.error("Error: missing argument for create_get_object_params: bucket=%r key=%r", bucket, key)
        return None
    return {"Bucket": bucket, "Key": key}


def parse_currency_rates(body: bytes | str) -> Optional[dict[str, Any]]:
    """Decode the fetched body as a JSON object, or None if it is malformed."""
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
        currency_rates = json.loads(text)
    except ValueError:
        logger.error("Error: malformed json: %r", body)
        return None

    if not isinstance(currency_rates, dict):
        logger.error("Error: malformed json: %r", body)
        return None
    return currency_rates


def get_file_stale_result(
    data_as_of: Any,
    stale_older_than_days: float,
    now: Optional[datetime] = None,
    generator_logs_url: str = DEFAULT_GENERATOR_LOGS_URL,
) -> StalenessResult:
    """Decide whether a file stamped data_as_of is older than the threshold.

    A file exactly stale_older_than_days old is not stale.

    Raises:
        ValueError: If data_as_of is not a timestamp.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    days_since_file = days_difference(parse_datetime(data_as_of), parse_datetime(now))

    if days_since_file > stale_older_than_days:
        return StalenessResult(
            stale=True,
            result=CheckResult(
                "The Prebid currency rates conversion data has a stale timestamp of "
                f"{data_as_of}. Please check the generator logs for failures: {generator_logs_url}"
            ),
        )
    return StalenessResult(
        stale=False,
        result=CheckResult(
            f"The Prebid currency rates conversion data has a timestamp of {data_as_of}, found not to be stale."
        ),
    )


def create_send_email_params(alert: AlertMessage) -> Optional[dict[str, Any]]:
    """Build the SES SendEmail request, or None if a required field is empty."""
    for field in fields(alert):
        if not getattr(alert, field.name):
            logger.error("Error: missing required argument for create_send_email_params: %s", field.name)
            return None
    return alert.to_ses_params()


def send_alert(result: CheckResult, config: AlerterConfig, mailer) -> Optional[CheckResult]:
    """Email result to the alert recipient.

    Returns the result unchanged whether or not the send succeeded, or None
    when the email could not be built.
    """
    alert = AlertMessage(
        recipient=config.alert_to,
        subject=config.alert_subject,
        sender=config.alert_from,
        reply_to=config.alert_from,
        body=result.message,
    )
    params = create_send_email_params(alert)
    if params is None:
        logger.error("Error: missing argument for send_alert")
        return None

    try:
        mailer.send_email(params)
    except AWS_ERRORS:
        logger.exception("Error sending alert email to %s", config.alert_to)
    else:
        logger.info("Alert '%s' sent.", result.message)
    return result


def currency_rates_load_success(
    body: bytes | str,
    config: AlerterConfig,
    mailer,
    now: Optional[datetime] = None,
) -> Optional[CheckResult]:
    currency_rates = parse_currency_rates(body)
    if currency_rates is None:
        return None

    data_as_of = currency_rates.get("dataAsOf")
    try:
        staleness = get_file_stale_result(
            data_as_of,
            config.stale_older_than_days,
            now=now,
            generator_logs_url=config.generator_logs_url,
        )
    except ValueError:
        logger.error("Error: currency rates file has an invalid dataAsOf: %r", data_as_of)
        return None

    if staleness.stale:
        logger.error(staleness.result.message)
        return send_alert(staleness.result, config, mailer)

    logger.info(staleness.result.message)
    return staleness.result


def currency_rates_load_error(exc: Exception, config: AlerterConfig, mailer) -> Optional[CheckResult]:
    logger.error("Error reading s3://%s/%s", config.bucket, config.filename, exc_info=exc)
    result = CheckResult(FETCH_ERROR_PREFIX + aws_error_message(exc))
    return send_alert(result, config, mailer)


def check_currency_rates_file(
    config: AlerterConfig,
    fetcher,
    mailer,
    now: Optional[datetime] = None,
) -> Optional[CheckResult]:
    """Fetch the currency rates file and alert if it is stale or unreadable.

    Args:
        config: Resolved alerter settings.
        fetcher: Object with get_object(bucket, key) -> bytes (see common.aws.ObjectFetcher).
        mailer: Object with send_email(params) (see common.aws.MailSender).
        now: Reference time (default: current UTC time).

    Returns:
        The completed invocation's result, or None when the invocation ended
        without completing (missing bucket/key, malformed file).
    """
    params = create_get_object_params(config.bucket, config.filename)
    if params is None:
        return None

    try:
        body = fetcher.get_object(params["Bucket"], params["Key"])
    except AWS_ERRORS as exc:
        return currency_rates_load_error(exc, config, mailer)

    return currency_rates_load_success(body, config, mailer, now=now)
