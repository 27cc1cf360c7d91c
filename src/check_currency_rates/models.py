"""Data models for the currency rates file check."""

from dataclasses import dataclass
from typing import Any

CHARSET = "UTF-8"


@dataclass(frozen=True)
class AlerterConfig:
    """Settings resolved once per invocation from the environment."""
    bucket: str
    filename: str
    alert_from: str
    alert_to: str
    alert_subject: str
    stale_older_than_days: float
    debug: bool
    generator_logs_url: str


@dataclass
class CheckResult:
    """Outcome reported when an invocation completes."""
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


@dataclass
class StalenessResult:
    stale: bool
    result: CheckResult


@dataclass
class AlertMessage:
    """Addressing and body of an alert email."""
    recipient: str
    subject: str
    sender: str
    reply_to: str
    body: str

    def to_ses_params(self) -> dict[str, Any]:
        """Build the SES SendEmail request for this alert."""
        return {
            "Destination": {"ToAddresses": [self.recipient]},
            "Message": {
                "Subject": {"Data": self.subject, "Charset": CHARSET},
                "Body": {"Text": {"Data": self.body, "Charset": CHARSET}},
            },
            "Source": self.sender,
            "ReplyToAddresses": [self.reply_to],
        }
