"""Freshdesk client — Tickets and conversations endpoints."""
from .base import delete, get, post, put

TICKETS = (
    get("list_all_tickets", "tickets", query_keys=None,
        doc="List tickets. Filters: filter, requester_id, email, company_id, updated_since, "
            "order_by, order_type, include, page, per_page."),
    get("filter_tickets", "search/tickets", query_args=("query",), query_keys=("page",),
        defaults={"page": 1}, quote_query=True,
        doc='Filter tickets with a query such as "priority:3 AND status:2".'),
    get("list_all_ticket_fields", "ticket_fields", query_keys=("type",),
        doc="List ticket fields, optionally only those of one type."),
    post("create_ticket", "tickets", doc="Create a ticket."),
    post("create_outbound_email", "tickets/outbound_email",
         doc="Send an outbound email, creating a closed ticket."),
    get("get_ticket", "tickets/{id}", query_keys=("include",),
        doc="View a ticket; include may be 'conversations', 'requester', 'company' or 'stats'."),
    put("update_ticket", "tickets/{id}", doc="Update a ticket."),
    delete("delete_ticket", "tickets/{id}", doc="Delete a ticket."),
    put("restore_ticket", "tickets/{id}/restore", body=False, doc="Restore a deleted ticket."),
    get("list_all_conversations", "tickets/{id}/conversations",
        doc="List all conversations of a ticket."),
    get("list_all_ticket_time_entries", "tickets/{id}/time_entries",
        doc="List the time entries of a ticket."),
)

CONVERSATIONS = (
    post("create_reply", "tickets/{id}/reply", doc="Reply to a ticket."),
    post("create_note", "tickets/{id}/notes", doc="Add a note to a ticket."),
    put("update_conversation", "conversations/{id}", doc="Update a conversation (notes only)."),
    delete("delete_conversation", "conversations/{id}", doc="Delete a conversation."),
)
