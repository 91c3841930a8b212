"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the ``Car`` record held by the store
so that the API representation (camelCase JSON, computed prices) is
decoupled from the stored data.
"""
