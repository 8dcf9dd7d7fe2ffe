"""Freshdesk client — Solutions (knowledge base) endpoints.

Categories hold folders, folders hold articles; each level also has
per-language translations addressed by ``language_code``.
"""
from .base import delete, get, post, put

CATEGORIES = (
    post("create_solution_category", "solutions/categories"),
    post("create_translated_solution_category", "solutions/categories/{id}/{language_code}"),
    put("update_solution_category", "solutions/categories/{id}"),
    put("update_translated_solution_category", "solutions/categories/{id}/{language_code}"),
    get("get_solution_category", "solutions/categories/{id}"),
    get("list_all_solution_categories", "solutions/categories"),
    delete("delete_solution_category", "solutions/categories/{id}"),
)

FOLDERS = (
    post("create_solution_folder", "solutions/categories/{id}/folders"),
    post("create_translated_solution_folder", "solutions/folders/{id}/{language_code}"),
    put("update_solution_folder", "solutions/folders/{id}"),
    put("update_translated_solution_folder", "solutions/folders/{id}/{language_code}"),
    get("get_solution_folder", "solutions/folders/{id}"),
    get("list_all_solution_category_folders", "solutions/categories/{id}/folders"),
    delete("delete_solution_folder", "solutions/folders/{id}"),
)

ARTICLES = (
    post("create_solution_article", "solutions/folders/{id}/articles"),
    post("create_translated_solution_article", "solutions/articles/{id}/{language_code}"),
    put("update_solution_article", "solutions/articles/{id}"),
    put("update_translated_solution_article", "solutions/articles/{id}/{language_code}"),
    get("get_solution_article", "solutions/articles/{id}"),
    get("get_translated_solution_article", "solutions/articles/{id}/{language_code}"),
    get("list_all_solution_folder_articles", "solutions/folders/{id}/articles"),
    delete("delete_solution_article", "solutions/articles/{id}"),
    get("search_solution_articles", "search/solutions", query_args=("term",),
        doc="Search solution articles by keyword."),
)

SOLUTIONS = CATEGORIES + FOLDERS + ARTICLES
