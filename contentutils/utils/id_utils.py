"""
Identifier and hashing helpers.

Provides unique id generation for new documents, md5 checksums, and the
explicit instance identity context a hosting process creates at startup.
"""

import hashlib
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union


ID_PART_LIMIT = 1_000_000_000


def generate_id() -> str:
    """
    Generate a unique identifier for a new document or other object.

    The identifier is a string of digits. Cryptographic security is not
    the goal, just uniqueness within the project.

    Returns:
        Identifier made of two random numbers concatenated.
    """
    return f"{random.randrange(ID_PART_LIMIT)}{random.randrange(ID_PART_LIMIT)}"


def md5(s: Union[str, bytes]) -> str:
    """
    Compute the MD5 checksum of a string.

    Args:
        s: Text (encoded as UTF-8) or raw bytes.

    Returns:
        Hexadecimal MD5 hash string.
    """
    if isinstance(s, str):
        s = s.encode("utf-8")

    hasher = hashlib.md5()
    hasher.update(s)
    return hasher.hexdigest()


@dataclass(frozen=True)
class InstanceContext:
    """
    Identity of one running instance of the platform.

    Attributes:
        pid: Identifier unique to this instance, even across servers.
        started_at: UTC time the instance was initialized.
    """
    pid: str
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def init_instance() -> InstanceContext:
    """
    Create the identity context for a new instance.

    Call once at startup and keep the result in the application's own
    context; nothing is stored at module level.
    """
    return InstanceContext(pid=generate_id())
