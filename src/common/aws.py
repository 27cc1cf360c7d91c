import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

AWS_ERRORS = (BotoCoreError, ClientError)


def get_s3_client():
    """Create S3 client."""
    return boto3.client("s3")


def get_ses_client():
    """Create SES client."""
    return boto3.client("ses")


def aws_error_message(exc: Exception) -> str:
    """Return the human readable message carried by an AWS error."""
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message")
        if message:
            return message
    return str(exc)


class ObjectFetcher:
    """Reads whole objects from S3."""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_s3_client()
        return self._client

    def get_object(self, bucket: str, key: str) -> bytes:
        """Return the raw body of s3://bucket/key."""
        response = self.client.get_object(Bucket=bucket, Key=key)
        content = response["Body"].read()
        logger.info("Read %d bytes from s3://%s/%s", len(content), bucket, key)
        return content


class MailSender:
    """Sends email through SES."""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_ses_client()
        return self._client

    def send_email(self, params: dict[str, Any]) -> dict[str, Any]:
        """Send a SES SendEmail request and return the service response."""
        return self.client.send_email(**params)


class LoggingMailSender:
    """Mail sender that only logs what it would have sent."""

    def __init__(self):
        self.sent: list[dict[str, Any]] = []

    def send_email(self, params: dict[str, Any]) -> dict[str, Any]:
        self.sent.append(params)
        logger.info(
            "Dry run, not sending email to %s: %s",
            params["Destination"]["ToAddresses"],
            params["Message"]["Subject"]["Data"],
        )
        return {}
