"""
SATIM Status Package
Interpretation of SATIM payment gateway responses.
"""

from dotenv import load_dotenv

from satim.config import SatimConfig, FLASK_CONFIG_KEYS
from satim.exceptions import (
    SatimException,
    SatimDataUnavailableException,
    SatimInvalidResponseException,
    SatimResponseAlreadyRecordedException,
)
from satim.session import SatimSession
from satim.status import SatimStatusChecker
from satim.utils import configure_logging

__all__ = [
    'SatimConfig',
    'SatimException',
    'SatimDataUnavailableException',
    'SatimInvalidResponseException',
    'SatimResponseAlreadyRecordedException',
    'SatimSession',
    'SatimStatusChecker',
    'init_satim',
]


def init_satim(app):
    """
    Initialize SATIM status handling with the Flask app.
    This should be called in the main app initialization.
    Loads the .env file, then re-reads the SATIM settings from the environment.
    """
    load_dotenv()
    SatimConfig.load_from_env()
    configure_logging()

    app.extensions['satim'] = SatimConfig

    for name, message in SatimConfig.get_messages().items():
        app.config.setdefault(FLASK_CONFIG_KEYS[name], message)

    app.logger.info("SATIM status checks enabled")

    return app
