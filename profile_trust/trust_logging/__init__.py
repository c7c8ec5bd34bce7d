"""
Structured logging for the profile trust core.

JSON logs with timestamp, event_type and masked secrets.
"""

from profile_trust.trust_logging.logger import configure_logging, get_logger, mask_secrets

__all__ = ["configure_logging", "get_logger", "mask_secrets"]
