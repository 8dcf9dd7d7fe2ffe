"""Freshdesk client — Companies endpoints."""
from .base import delete, get, post, put

COMPANIES = (
    post("create_company", "companies", doc="Create a company."),
    get("get_company", "companies/{id}", doc="View a company."),
    get("search_company", "companies/autocomplete", query_keys=("name",),
        doc="Search companies by name prefix."),
    get("list_all_companies", "companies", query_keys=("page",), doc="List companies."),
    get("filter_companies", "search/companies", query_args=("query",), quote_query=True,
        doc="Filter companies with a query on company fields."),
    get("list_all_company_fields", "company_fields", doc="List all company fields."),
    put("update_company", "companies/{id}", doc="Update a company."),
    delete("delete_company", "companies/{id}", doc="Delete a company."),
)
