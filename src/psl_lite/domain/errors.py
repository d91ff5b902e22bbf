"""Error taxonomy for domain classification.

Classification errors are local and recoverable: batch and validity
checks catch them and move on. RulesetLoadError is the one fatal
condition and only surfaces while a RuleStore is being built.
"""
from __future__ import annotations


class DomainClassificationError(Exception):
    """Base class for conditions raised while classifying one input."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class EmptyInput(DomainClassificationError):
    """Raised when normalization leaves nothing to classify."""


class NoRegisteredDomain(DomainClassificationError):
    """Raised when a hostname has no registrable boundary."""


class NoPublicSuffixDetermined(DomainClassificationError):
    """Raised when no listed public suffix covers the hostname."""


class RulesetLoadError(Exception):
    """Raised when a ruleset is missing, unreadable or malformed."""
