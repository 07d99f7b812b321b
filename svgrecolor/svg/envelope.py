"""Base64 data-URI envelope for inline SVG.

``data:image/svg+xml;charset=utf-8;base64,<payload>`` is unwrapped for
processing and re-wrapped afterwards with the original header, parameters
included, reproduced byte for byte.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_ENVELOPE_RE = re.compile(
    r"(?P<header>data:image/svg\+xml(?P<params>(?:;[^;,]+?=[^;,]*)*);base64,)(?P<payload>[A-Za-z0-9+/=\s]*)",
    re.IGNORECASE,
)
_CHARSET_RE = re.compile(r";charset=\"?(?P<charset>[^;,\"]+)", re.IGNORECASE)


@dataclass(frozen=True)
class Envelope:
    # Everything up to and including the comma
    header: str
    charset: str = "utf-8"


def unwrap(text: str) -> tuple[Envelope | None, str]:
    """Split ``text`` into (envelope, markup). Plain markup yields (None, text)."""
    m = _ENVELOPE_RE.fullmatch(text.strip())
    if m is None:
        return None, text

    header = m.group("header")
    charset_match = _CHARSET_RE.search(m.group("params"))
    charset = charset_match.group("charset") if charset_match else "utf-8"
    try:
        raw = base64.b64decode("".join(m.group("payload").split()), validate=True)
        markup = raw.decode(charset)
    except (binascii.Error, LookupError, UnicodeDecodeError) as e:
        logger.debug("Envelope-like input did not decode (%s); treating as plain text", e)
        return None, text
    return Envelope(header=header, charset=charset), markup


def wrap(envelope: Envelope | None, markup: str) -> str:
    """Inverse of unwrap: re-encode ``markup`` under the original header."""
    if envelope is None:
        return markup
    # Characters the declared charset cannot hold become character references
    payload = base64.b64encode(markup.encode(envelope.charset, errors="xmlcharrefreplace")).decode("ascii")
    return envelope.header + payload
