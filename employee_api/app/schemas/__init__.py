"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored records in ``models`` to
decouple the API representation (camelCase JSON) from persistence.
"""
