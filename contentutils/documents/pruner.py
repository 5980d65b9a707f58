"""
Recursive pruning of keys from nested document trees.

A document tree is a scalar, a sequence of trees, or a mapping of keys to
trees. Pruning walks the tree, asks a predicate about every mapping entry
along with its dot path (e.g. "a.b.0.c"), and deletes the entries the
predicate rejects. The tree is modified in place.
"""

from collections.abc import MutableMapping, Sequence
from typing import Any, Callable, Iterable, Optional

# predicate(container, key, value, dot_path) -> True to remove the key
PrunePredicate = Callable[[Any, Any, Any, str], bool]

TEMPORARY_PREFIX = "_"
IDENTITY_KEY = "_id"


def _is_mapping(value: Any) -> bool:
    return isinstance(value, MutableMapping)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_container(value: Any) -> bool:
    return _is_mapping(value) or _is_sequence(value)


def prune_deep(doc: Any, predicate: PrunePredicate) -> None:
    """
    Recursively remove keys from a document tree.

    The predicate is called for every key of every mapping in the tree.
    Keys it returns True for are deleted once their mapping has been fully
    visited; other values are descended into. Sequence elements are
    descended into but never passed to the predicate or removed.

    For { "a": { "b": 5 } } the predicate sees key "b" with dot path "a.b".
    Sequence indexes appear in paths as numbers: "items.0.title".

    Exceptions raised by the predicate propagate unchanged, leaving the
    tree partially pruned. The tree must not contain cycles.

    Args:
        doc: Document tree to prune in place.
        predicate: Called as predicate(container, key, value, dot_path).
    """
    _prune(doc, predicate, None)


def _prune(node: Any, predicate: PrunePredicate, dot_path: Optional[str]) -> None:
    prefix = "" if dot_path is None else dot_path + "."

    if _is_sequence(node):
        for index, item in enumerate(node):
            if _is_container(item):
                _prune(item, predicate, f"{prefix}{index}")
        return

    if not _is_mapping(node):
        return

    remove = []
    for key, value in node.items():
        child_path = f"{prefix}{key}"
        if predicate(node, key, value, child_path):
            remove.append(key)
        elif _is_container(value):
            _prune(value, predicate, child_path)

    for key in remove:
        del node[key]


def temporary_property_predicate(
    reserved_prefix: str = TEMPORARY_PREFIX,
    preserved_keys: Iterable[str] = (IDENTITY_KEY,)
) -> PrunePredicate:
    """
    Build a predicate matching temporary properties.

    Args:
        reserved_prefix: Keys starting with this prefix are temporary.
        preserved_keys: Keys kept even though they carry the prefix.

    Returns:
        Predicate suitable for prune_deep().
    """
    preserved = frozenset(preserved_keys)

    def is_temporary(container: Any, key: Any, value: Any, dot_path: str) -> bool:
        # Keys can be numeric
        key = str(key)
        return key.startswith(reserved_prefix) and key not in preserved

    return is_temporary


def prune_temporary_properties(
    doc: Any,
    reserved_prefix: str = TEMPORARY_PREFIX,
    preserved_keys: Iterable[str] = (IDENTITY_KEY,)
) -> None:
    """
    Remove temporary properties from a document tree in place.

    Except for "_id", no property beginning with "_" should be stored in
    or loaded from the database: those names are reserved for dynamically
    computed values such as permissions and joins. Nested mappings,
    including those inside sequences, are pruned too.

    Args:
        doc: Document tree to prune.
        reserved_prefix: Prefix marking temporary properties.
        preserved_keys: Prefixed keys that are always kept.
    """
    prune_deep(doc, temporary_property_predicate(reserved_prefix, preserved_keys))
