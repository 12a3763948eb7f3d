"""
Shared, cross-cutting code for the API.

`core/` holds the building blocks every feature uses (DB handle, raw SQL
helpers). Keep feature-specific SQL and business logic in the corresponding
feature package (e.g. `customers/`).
"""
