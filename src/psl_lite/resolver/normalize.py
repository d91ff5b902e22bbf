"""Input normalization: email address or URL-ish string -> hostname.

Only enough is stripped to reach the host part. Character sets are not
validated; garbage survives normalization and is later classified as
invalid because no listed suffix covers it.
"""
from __future__ import annotations

import re

from psl_lite.domain.errors import EmptyInput
from psl_lite.domain.types import Hostname, LabelSequence

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_PATH_RE = re.compile(r"[/?#]")


def normalize_input(raw: str | None) -> Hostname:
    """Reduce an email address or hostname to a lowercase hostname.

    Steps, in order:
      1. trim whitespace
      2. keep what follows the last "@"
      3. drop a leading http:// or https://
      4. cut at the first "/", "?" or "#"
      5. cut at the first ":" (port)
      6. lowercase and trim again

    Raises EmptyInput if the input is empty after trimming or nothing
    is left at the end.
    """
    text = (raw or "").strip()
    if not text:
        raise EmptyInput("Email or hostname is required", raw)

    if "@" in text:
        text = text.rsplit("@", 1)[1]
    text = _SCHEME_RE.sub("", text, count=1)
    text = _PATH_RE.split(text, maxsplit=1)[0]
    text = text.split(":", 1)[0]
    hostname = text.lower().strip()

    if not hostname:
        raise EmptyInput("Could not extract a hostname from input", raw)
    return hostname


def split_labels(hostname: Hostname) -> LabelSequence:
    """Split a normalized hostname into labels, most-significant last.

    A single trailing dot (fully-qualified form) is dropped; any other
    empty label is kept so the resolver can flag it.
    """
    if hostname.endswith(".") and len(hostname) > 1:
        hostname = hostname[:-1]
    return tuple(hostname.split("."))
