import logging
from logging.config import dictConfig

from app.core.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },
        'handlers': {
            'default': {
                'level': level,
                'formatter': 'standard',
                'class': 'logging.StreamHandler',
            },
        },
        'loggers': {
            # Root handlers are left to the host process
            'app': {
                'handlers': ['default'],
                'level': level,
                'propagate': True
            },
            # The Stripe SDK logs full request lines at INFO
            'stripe': {
                'level': 'WARNING',
            },
        }
    }

    dictConfig(logging_config)
    logging.getLogger(__name__).debug(f"Logging configured at level {level}")
