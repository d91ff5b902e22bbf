"""Public Suffix List ingestion.

The PSL is line oriented:
  - "//" starts a comment line
  - "// ===BEGIN ICANN DOMAINS===" ... "// ===END ICANN DOMAINS===" and
    the matching PRIVATE markers partition the file into sections
  - a rule is the first whitespace-delimited token of any other line

Rules that appear outside both sections are treated as ICANN, which
keeps hand-written rulesets (tests, overrides) short.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from psl_lite.domain.errors import RulesetLoadError
from psl_lite.domain.rules import Rule, Section


_SECTION_MARKERS = {
    "===BEGIN ICANN DOMAINS===": Section.ICANN,
    "===BEGIN PRIVATE DOMAINS===": Section.PRIVATE,
    "===END ICANN DOMAINS===": None,
    "===END PRIVATE DOMAINS===": None,
}


def parse_rules(lines: Iterable[str]) -> Iterator[Rule]:
    """Yield rules from PSL-formatted lines, tagging each with its section.

    Raises RulesetLoadError on the first malformed rule, naming its line.
    """
    section: Section | None = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("//"):
            marker = line[2:].strip()
            if marker in _SECTION_MARKERS:
                section = _SECTION_MARKERS[marker]
            continue

        token = line.split()[0]
        try:
            yield Rule.parse(token, section or Section.ICANN)
        except ValueError as e:
            raise RulesetLoadError(f"line {lineno}: {e}") from e


def read_ruleset(path: str | Path) -> list[str]:
    """Read a ruleset file into lines, mapping I/O failures to RulesetLoadError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RulesetLoadError(f"cannot read ruleset {path}: {e}") from e
