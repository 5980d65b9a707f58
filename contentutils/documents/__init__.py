"""
Documents module for pruning and persisting nested document trees.

Provides the generic deep prune walker, the temporary property pruner
built on it, and JSON load/save helpers that apply it at the storage
boundary.
"""

from .pruner import (
    PrunePredicate,
    prune_deep,
    prune_temporary_properties,
    temporary_property_predicate
)
from .store import load_document, save_document

__all__ = [
    "PrunePredicate",
    "prune_deep",
    "prune_temporary_properties",
    "temporary_property_predicate",
    "load_document",
    "save_document"
]
