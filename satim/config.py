"""
SATIM Configuration
Message and logging settings for SATIM response interpretation.
"""

import os
from typing import Dict

from flask import current_app, has_app_context

from .constants import (
    DEFAULT_SUCCESS_MESSAGE,
    DEFAULT_FAILURE_MESSAGE,
    DEFAULT_REFUND_MESSAGE,
)


class SatimConfig:
    """
    SATIM configuration.
    Values are read from environment variables by load_from_env(); init_satim()
    loads the app's .env file first.

    The rejection message is fixed (see constants.REJECTED_MESSAGE) and is
    not configurable.
    """

    # Messages shown when the gateway gives no description of its own
    SUCCESS_MESSAGE = DEFAULT_SUCCESS_MESSAGE
    FAILURE_MESSAGE = DEFAULT_FAILURE_MESSAGE
    REFUND_MESSAGE = DEFAULT_REFUND_MESSAGE

    LOG_LEVEL = 'INFO'

    @classmethod
    def load_from_env(cls):
        """Read the settings from the current environment."""
        cls.SUCCESS_MESSAGE = os.environ.get('SATIM_SUCCESS_MESSAGE', DEFAULT_SUCCESS_MESSAGE)
        cls.FAILURE_MESSAGE = os.environ.get('SATIM_FAILURE_MESSAGE', DEFAULT_FAILURE_MESSAGE)
        cls.REFUND_MESSAGE = os.environ.get('SATIM_REFUND_MESSAGE', DEFAULT_REFUND_MESSAGE)
        cls.LOG_LEVEL = os.environ.get('SATIM_LOG_LEVEL', 'INFO').upper()

    @classmethod
    def get_messages(cls) -> Dict[str, str]:
        """
        Get the configured message set.

        Returns:
            Dictionary with 'success', 'failure' and 'refund' messages
        """
        messages = {
            'success': cls.SUCCESS_MESSAGE,
            'failure': cls.FAILURE_MESSAGE,
            'refund': cls.REFUND_MESSAGE,
        }

        # Values set on a Flask app registered with init_satim() take precedence
        if has_app_context() and 'satim' in current_app.extensions:
            for name, key in FLASK_CONFIG_KEYS.items():
                if current_app.config.get(key):
                    messages[name] = current_app.config[key]

        return messages


# Flask config keys the messages are exposed under by init_satim()
FLASK_CONFIG_KEYS = {
    'success': 'SATIM_SUCCESS_MESSAGE',
    'failure': 'SATIM_FAILURE_MESSAGE',
    'refund': 'SATIM_REFUND_MESSAGE',
}

SatimConfig.load_from_env()
