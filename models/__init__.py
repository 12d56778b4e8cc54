"""
Data Models for the query adapters

Available Models:
    - AdapterSettings: Immutable adapter configuration
    - QueryResult: Uniform tabular result (columns, rows, error)
    - IgniteEnvelope / IgniteQueryResponse / IgniteFieldMetadata: Ignite REST bodies
"""

from models.result import AdapterSettings, QueryResult, TypedValue
from models.ignite import (
    IgniteEnvelope,
    IgniteFieldMetadata,
    IgniteQueryResponse
)

__all__ = [
    "AdapterSettings",
    "QueryResult",
    "TypedValue",
    "IgniteEnvelope",
    "IgniteFieldMetadata",
    "IgniteQueryResponse",
]
