"""
HTML helpers: escaping plaintext for markup and flattening markup to text.
"""

import html
import re
from typing import Any


_NEWLINE_PATTERN = re.compile(r"\r?\n")
_URL_PATTERN = re.compile(r"https?:[^\s<]+")

_CLOSING_TAG_PATTERN = re.compile(r"</.*?>")
_BLOCK_TAG_PATTERN = re.compile(
    r"<(h1|h2|h3|h4|h5|h6|p|br|blockquote|li|article|address|footer|pre|header"
    r"|table|tr|td|th|tfoot|thead|div|dl|dt|dd).*?>",
    re.IGNORECASE
)
_ANY_TAG_PATTERN = re.compile(r"<.*?>")


def escape_html(s: Any, pretty: bool = False, single: bool = False) -> str:
    """
    Escape a plaintext string for use in HTML.

    Args:
        s: Text to escape. None becomes "", other values are stringified.
        pretty: Turn newlines into <br /> tags and URLs into links.
        single: Escape single quotes instead of double quotes.

    Returns:
        Escaped HTML string.
    """
    if s is None:
        s = ""
    elif not isinstance(s, str):
        s = str(s)

    s = s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    if single:
        s = s.replace("'", "&#39;")
    else:
        s = s.replace('"', "&#34;")

    if pretty:
        s = _NEWLINE_PATTERN.sub("<br />", s)
        # Newlines are already <br /> here, so URLs stop at the next tag
        s = _URL_PATTERN.sub(_link_url, s)

    return s


def _link_url(match: re.Match) -> str:
    url = match.group(0).strip()
    return f'<a href="{escape_html(url)}">{url}</a>'


def html_to_plaintext(markup: str) -> str:
    """
    Convert HTML to plaintext with all entities decoded.

    Opening tags of block elements become newlines; closing tags and
    every other tag are dropped.

    Args:
        markup: HTML source.

    Returns:
        Plaintext content.
    """
    text = _CLOSING_TAG_PATTERN.sub("", markup)
    text = _BLOCK_TAG_PATTERN.sub("\n", text)
    text = _ANY_TAG_PATTERN.sub("", text)
    return html.unescape(text)
