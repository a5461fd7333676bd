"""Percent-encoding of the ``Path=`` field of ``.trashinfo`` records.

The escape set follows the URI path rules of the FreeDesktop.org Trash
specification: control bytes (0x00-0x1F, 0x7F), space, and
``% # < > " { } | \\ ^ ``` are escaped, as is every byte of a non-ASCII
character's UTF-8 encoding.
``/``, alphanumerics and the remaining printable ASCII are left alone.

Examples:
    encode_path("/home/user/my file.txt") -> "/home/user/my%20file.txt"
    decode_path("/path/to/file%25with%25.txt") -> "/path/to/file%with%.txt"
"""

from __future__ import annotations

import os
from urllib.parse import quote_from_bytes, unquote_to_bytes

PATH_ESCAPE_CHARS = ' %#<>"{}|\\^`'

# Printable ASCII minus the escape set; ``quote`` always keeps alnum and "_.-~".
SAFE_CHARS = "".join(
    chr(code) for code in range(0x21, 0x7F) if chr(code) not in PATH_ESCAPE_CHARS
)


def encode_path(path: str) -> str:
    """Percent-encode *path* for the ``Path=`` key.

    Filenames that are not valid UTF-8 reach Python as surrogate-escaped
    strings; ``os.fsencode`` turns them back into their raw bytes, which are
    then escaped byte-wise like any other non-ASCII byte.
    """
    return quote_from_bytes(os.fsencode(path), safe=SAFE_CHARS)


def decode_path(encoded: str) -> str:
    """Decode a ``Path=`` value back to a filesystem path.

    Sequences that are not valid escapes (``%GG``) pass through literally,
    as do raw bytes that a record holds unescaped (read back as surrogates).
    Raises ``UnicodeDecodeError`` if the decoded bytes are not valid UTF-8.
    """
    raw = encoded.encode("utf-8", "surrogateescape")
    return unquote_to_bytes(raw).decode("utf-8")
