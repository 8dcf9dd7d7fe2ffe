"""Freshdesk API v2 client."""

from .client import Freshdesk
from .config import AgentTicketScope, TicketPriority, TicketSource, TicketStatus
from .http_client import (
    FreshdeskAPIError,
    FreshdeskError,
    FreshdeskTransportError,
    Outcome,
    RequestDescriptor,
    execute,
)

__version__ = "0.1.0"

__all__ = [
    "AgentTicketScope",
    "Freshdesk",
    "FreshdeskAPIError",
    "FreshdeskError",
    "FreshdeskTransportError",
    "Outcome",
    "RequestDescriptor",
    "TicketPriority",
    "TicketSource",
    "TicketStatus",
    "execute",
]
