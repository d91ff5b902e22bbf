"""Public Suffix List rule entity.

A rule is one line of the PSL. Three spellings exist:
  - "co.uk"      -- normal rule, the labels themselves are a suffix
  - "*.ck"       -- wildcard rule, any one label under "ck" is a suffix
  - "!www.ck"    -- exception rule, carves "www.ck" out of "*.ck"

Labels are stored without the "*" / "!" markers, most-significant
label last, the same direction as a hostname's label sequence. The
marker is carried by kind instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from psl_lite.domain.types import LabelSequence


class RuleKind(Enum):
    NORMAL = auto()
    WILDCARD = auto()
    EXCEPTION = auto()


class Section(Enum):
    ICANN = auto()
    PRIVATE = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """A single PSL rule.

    For a wildcard rule, labels holds the literal part only:
    "*.kawasaki.jp" is stored as ("kawasaki", "jp").
    For an exception rule, labels holds the full literal sequence:
    "!city.kawasaki.jp" is stored as ("city", "kawasaki", "jp").
    """
    labels: LabelSequence
    kind: RuleKind = RuleKind.NORMAL
    section: Section = Section.ICANN

    @classmethod
    def parse(cls, text: str, section: Section = Section.ICANN) -> Rule:
        """Parse a rule from its PSL spelling.

        Raises ValueError for an empty rule, empty labels, or a "*"
        anywhere but the leftmost label.
        """
        raw = text.strip().lower()
        kind = RuleKind.NORMAL
        if raw.startswith("!"):
            kind = RuleKind.EXCEPTION
            raw = raw[1:]
        elif raw.startswith("*."):
            kind = RuleKind.WILDCARD
            raw = raw[2:]

        if not raw:
            raise ValueError(f"Empty rule: {text!r}")
        labels = tuple(raw.split("."))
        if any(not label for label in labels):
            raise ValueError(f"Rule has an empty label: {text!r}")
        if any(label == "*" or label.startswith("!") for label in labels):
            raise ValueError(
                f"Wildcard and exception markers are only allowed on the "
                f"leftmost label: {text!r}"
            )
        if kind is RuleKind.EXCEPTION and len(labels) < 2:
            raise ValueError(f"Exception rule needs a parent suffix: {text!r}")
        return cls(labels=labels, kind=kind, section=section)

    @property
    def text(self) -> str:
        """The rule in PSL spelling, markers included."""
        body = ".".join(self.labels)
        if self.kind is RuleKind.WILDCARD:
            return f"*.{body}"
        if self.kind is RuleKind.EXCEPTION:
            return f"!{body}"
        return body

    @property
    def suffix_length(self) -> int:
        """Number of hostname labels this rule claims as public suffix.

        Wildcards consume one label beyond the literal part; exceptions
        give back their leftmost label.
        """
        if self.kind is RuleKind.WILDCARD:
            return len(self.labels) + 1
        if self.kind is RuleKind.EXCEPTION:
            return len(self.labels) - 1
        return len(self.labels)
