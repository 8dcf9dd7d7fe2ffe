"""Freshdesk client — endpoint tables.

Each sub-module declares the endpoints of one resource group.
"""
from typing import Dict, Tuple

from .agents import AGENTS, ROLES
from .base import Endpoint
from .companies import COMPANIES
from .contacts import CONTACTS
from .misc import EMAIL_CONFIGS, GROUPS, SETTINGS
from .solutions import SOLUTIONS
from .tickets import CONVERSATIONS, TICKETS
from .time_entries import TIME_ENTRIES

# Mapping from resource group → its endpoints.
RESOURCE_REGISTRY: Dict[str, Tuple[Endpoint, ...]] = {
    "tickets": TICKETS,
    "conversations": CONVERSATIONS,
    "contacts": CONTACTS,
    "agents": AGENTS,
    "roles": ROLES,
    "companies": COMPANIES,
    "time_entries": TIME_ENTRIES,
    "solutions": SOLUTIONS,
    "settings": SETTINGS,
    "groups": GROUPS,
    "email_configs": EMAIL_CONFIGS,
}

ENDPOINTS: Dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoints in RESOURCE_REGISTRY.values()
    for endpoint in endpoints
}

__all__ = ["ENDPOINTS", "Endpoint", "RESOURCE_REGISTRY"]
