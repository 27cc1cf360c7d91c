"""AWS Lambda entry point: handler = check_currency_rates.handler.handler"""

import json
import logging

from check_currency_rates.check_currency_rates import check_currency_rates_file
from check_currency_rates.helpers import load_config
from common.aws import MailSender, ObjectFetcher
from common.cli_helpers import setup_logging

logger = logging.getLogger(__name__)


def handler(event, context):
    """Run one check. The returned dict is the invocation's result."""
    config = load_config()
    setup_logging(config.debug)
    logger.info("Event: %s", json.dumps(event, default=str))

    if context is None:
        logger.error("Error: invalid arguments for handler: missing context")
        return None

    result = check_currency_rates_file(config, ObjectFetcher(), MailSender())
    if result is None:
        return None
    return result.to_dict()
