"""Freshdesk client — Contacts endpoints."""
from .base import delete, get, post, put

CONTACTS = (
    post("create_contact", "contacts", doc="Create a contact."),
    get("get_contact", "contacts/{id}", doc="View a contact."),
    get("list_all_contacts", "contacts", query_keys=None,
        doc="List contacts. Filters: email, mobile, phone, company_id, state, updated_since, page, per_page."),
    put("update_contact", "contacts/{id}", doc="Update a contact."),
    delete("delete_contact", "contacts/{id}", doc="Soft-delete a contact."),
    put("make_agent", "contacts/{id}/make_agent", body=False, doc="Convert a contact into an agent."),
    get("list_all_contact_fields", "contact_fields", doc="List all contact fields."),
    get("filter_contacts", "search/contacts", query_args=("query",), quote_query=True,
        doc="Filter contacts with a query such as \"active:true AND company_id:3\"."),
)
