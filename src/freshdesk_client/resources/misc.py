"""Freshdesk client — Settings, groups and email config endpoints."""
from .base import get

SETTINGS = (
    get("get_settings", "settings/helpdesk", doc="View helpdesk settings."),
)

GROUPS = (
    get("list_all_groups", "groups", doc="List all groups."),
)

EMAIL_CONFIGS = (
    get("list_all_email_configs", "email_configs", doc="List all support email configurations."),
)
