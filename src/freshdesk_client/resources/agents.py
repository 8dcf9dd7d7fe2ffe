"""Freshdesk client — Agents and roles endpoints."""
from .base import delete, get, put

AGENTS = (
    get("get_agent", "agents/{id}", doc="View an agent."),
    get("list_all_agents", "agents", query_keys=None,
        doc="List agents. Filters: email, mobile, phone, state (fulltime or occasional), page, per_page."),
    put("update_agent", "agents/{id}", doc="Update an agent."),
    delete("delete_agent", "agents/{id}", doc="Downgrade an agent to a contact."),
    get("current_agent", "agents/me", doc="View the agent owning the API key."),
)

ROLES = (
    get("get_role", "roles/{id}", doc="View a role."),
    get("list_all_roles", "roles", doc="List all roles."),
)
