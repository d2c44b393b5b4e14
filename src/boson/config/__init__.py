"""
Configuration: logging setup and static protocol tables.
"""

from .logging import LoggingConfig, configure_logging
from .revert_reasons import RevertReasons, match_revert_reason

__all__ = [
    # Logging
    "LoggingConfig",
    "configure_logging",
    # Revert reasons
    "RevertReasons",
    "match_revert_reason",
]
