"""Freshdesk client — Configuration and constants."""
import os
import logging
from enum import IntEnum
from typing import Optional, Union

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logger = logging.getLogger("freshdesk_client")


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Set up root logging for command-line use.

    Library code only emits records; callers embedding the client keep
    control of handlers.
    """
    if level is None:
        level = FRESHDESK_LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(level=level)
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# API credentials
# ---------------------------------------------------------------------------
FRESHDESK_BASE_URL = os.getenv("FRESHDESK_BASE_URL")
FRESHDESK_APIKEY = os.getenv("FRESHDESK_APIKEY")
FRESHDESK_LOG_LEVEL = os.getenv("FRESHDESK_LOG_LEVEL", "WARNING")

API_PREFIX = "api/v2"

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TicketSource(IntEnum):
    EMAIL = 1
    PORTAL = 2
    PHONE = 3
    CHAT = 7
    FEEDBACK_WIDGET = 9
    OUTBOUND_EMAIL = 10

class TicketStatus(IntEnum):
    OPEN = 2
    PENDING = 3
    RESOLVED = 4
    CLOSED = 5

class TicketPriority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4

class AgentTicketScope(IntEnum):
    GLOBAL_ACCESS = 1
    GROUP_ACCESS = 2
    RESTRICTED_ACCESS = 3
