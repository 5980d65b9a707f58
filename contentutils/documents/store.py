"""
JSON document persistence with temporary property pruning.

Documents are pruned immediately before they are written, and again after
they are read so trees that passed through untrusted hands never carry
temporary properties into the application.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from ..core import ConfigurationError, DocumentError, get_config, get_logger
from .pruner import IDENTITY_KEY, TEMPORARY_PREFIX, prune_temporary_properties

logger = get_logger(__name__)


def _pruning_settings(
    reserved_prefix: Optional[str],
    preserved_keys: Optional[Iterable[str]]
) -> tuple:
    """Fill unspecified pruning settings from config.json, or built-in defaults without one."""
    if reserved_prefix is None or preserved_keys is None:
        try:
            pruning = get_config().pruning
        except ConfigurationError:
            default_prefix, default_keys = TEMPORARY_PREFIX, (IDENTITY_KEY,)
        else:
            default_prefix, default_keys = pruning.reserved_prefix, pruning.preserved_keys

        if reserved_prefix is None:
            reserved_prefix = default_prefix
        if preserved_keys is None:
            preserved_keys = default_keys
    return reserved_prefix, tuple(preserved_keys)


def load_document(
    path: Union[str, Path],
    reserved_prefix: Optional[str] = None,
    preserved_keys: Optional[Iterable[str]] = None
) -> Any:
    """
    Load a JSON document and strip its temporary properties.

    Args:
        path: Path to the JSON file.
        reserved_prefix: Prefix marking temporary properties (config default).
        preserved_keys: Prefixed keys that are always kept (config default).

    Returns:
        The sanitized document tree.

    Raises:
        DocumentError: If the file is missing, unreadable, not UTF-8 or not valid JSON.
    """
    path = Path(path)
    if not path.exists():
        raise DocumentError(f"Document not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentError(
            f"Invalid JSON in document: {e}",
            path=str(path),
            details={"line": e.lineno, "column": e.colno}
        )
    except UnicodeDecodeError as e:
        raise DocumentError(
            f"Document is not valid UTF-8: {e.reason}",
            path=str(path),
            details={"position": e.start}
        )
    except OSError as e:
        raise DocumentError(f"Cannot read document: {e}", path=str(path))

    reserved_prefix, preserved_keys = _pruning_settings(reserved_prefix, preserved_keys)
    prune_temporary_properties(doc, reserved_prefix, preserved_keys)

    logger.debug(f"Loaded document: {path}")
    return doc


def save_document(
    path: Union[str, Path],
    doc: Any,
    reserved_prefix: Optional[str] = None,
    preserved_keys: Optional[Iterable[str]] = None
) -> Path:
    """
    Prune temporary properties from a document and write it as JSON.

    The document is modified in place before writing.

    Args:
        path: Destination file. Parent directories are created.
        doc: Document tree to store.
        reserved_prefix: Prefix marking temporary properties (config default).
        preserved_keys: Prefixed keys that are always kept (config default).

    Returns:
        Path the document was written to.

    Raises:
        DocumentError: If the document cannot be serialized or written.
    """
    path = Path(path)

    reserved_prefix, preserved_keys = _pruning_settings(reserved_prefix, preserved_keys)
    prune_temporary_properties(doc, reserved_prefix, preserved_keys)

    try:
        payload = json.dumps(doc, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise DocumentError(
            f"Document is not JSON serializable: {e}",
            path=str(path)
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot write document: {e}", path=str(path))

    logger.debug(f"Saved document: {path}")
    return path
