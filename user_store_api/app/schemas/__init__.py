"""
Pydantic schema definitions for API payloads.

Schemas double as the stored value type: a ``User`` is immutable once
built, so the store can hand out the same instance to every reader.
"""
