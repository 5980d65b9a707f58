"""
Utility module providing shared helper functions.

Contains text truncation and conversion, HTML escaping, and id/hash
helpers used across the platform. Has no internal dependencies.
"""

from .text_utils import (
    truncate_plaintext,
    global_replace,
    capitalize_first,
    css_name,
    camel_name,
    add_slash_if_needed
)
from .html_utils import (
    escape_html,
    html_to_plaintext
)
from .id_utils import (
    generate_id,
    md5,
    InstanceContext,
    init_instance
)

__all__ = [
    "truncate_plaintext",
    "global_replace",
    "capitalize_first",
    "css_name",
    "camel_name",
    "add_slash_if_needed",
    "escape_html",
    "html_to_plaintext",
    "generate_id",
    "md5",
    "InstanceContext",
    "init_instance"
]
