"""Freshdesk client — Time entries endpoints.

``list_all_time_entries`` accepts ``billable`` as a bool and the
``executed_*`` bounds as datetimes; the executor serialises both.
"""
from .base import delete, get, post, put

TIME_ENTRIES = (
    post("create_time_entry", "tickets/{ticket_id}/time_entries", doc="Create a time entry on a ticket."),
    get("list_all_time_entries", "time_entries",
        query_keys=("company_id", "agent_id", "executed_before", "executed_after", "billable", "page"),
        doc="List time entries."),
    put("update_time_entry", "time_entries/{id}", doc="Update a time entry."),
    put("toggle_timer", "time_entries/{id}/toggle_timer", body=False, doc="Start or stop a timer."),
    delete("delete_time_entry", "time_entries/{id}", doc="Delete a time entry; it cannot be restored."),
)
