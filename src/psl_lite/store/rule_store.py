"""RuleStore: immutable index over a Public Suffix List ruleset.

Wraps the SuffixTrie (for the real lookups) and a flat rule map (for a
naive baseline that probes every candidate suffix separately). Both are
built once, in the constructor, and never change afterwards, so a single
store can be shared by any number of resolvers and threads without
locking.

Usage:
    store = RuleStore.bundled()
    store.match(("mail", "example", "co", "uk"))
    # SuffixMatch(length=2, kind=RuleKind.NORMAL, section=Section.ICANN)

    store = RuleStore.from_text("*.foo\\n!bar.foo\\n")
    store.match(("bar", "foo")).length
    # 1
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path

from psl_lite.domain.errors import RulesetLoadError
from psl_lite.domain.rules import Rule, RuleKind, Section
from psl_lite.domain.types import LabelSequence
from psl_lite.store.loader import parse_rules, read_ruleset
from psl_lite.store.trie import DEFAULT_MATCH, SuffixMatch, SuffixTrie

log = logging.getLogger(__name__)

BUNDLED_RULESET = "public_suffix_list.dat"


class RuleStore:
    """Longest-match public suffix lookups over a fixed set of rules.

    Raises RulesetLoadError if the rule iterable is empty. Duplicate
    rules keep their first occurrence.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._trie = SuffixTrie()
        self._flat: dict[tuple[RuleKind, LabelSequence], Rule] = {}
        accepted: list[Rule] = []
        for rule in rules:
            if not self._trie.insert(rule):
                log.debug("Skipping duplicate rule %s", rule.text)
                continue
            self._flat[(rule.kind, rule.labels)] = rule
            accepted.append(rule)

        if not accepted:
            raise RulesetLoadError("ruleset contains no rules")
        self._rules = tuple(accepted)
        self._icann_count = sum(1 for r in accepted if r.section is Section.ICANN)
        log.info(
            "Loaded %d public suffix rules (%d ICANN, %d private)",
            len(accepted), self._icann_count, len(accepted) - self._icann_count,
        )

    # -- constructors ------------------------------------------------------

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleStore:
        return cls(rules)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> RuleStore:
        return cls(parse_rules(lines))

    @classmethod
    def from_text(cls, text: str) -> RuleStore:
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_path(cls, path: str | Path) -> RuleStore:
        log.debug("Reading ruleset from %s", path)
        return cls.from_lines(read_ruleset(path))

    @classmethod
    def bundled(cls) -> RuleStore:
        """Build a store from the PSL snapshot shipped with the package."""
        ref = resources.files("psl_lite").joinpath("data").joinpath(BUNDLED_RULESET)
        try:
            text = ref.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RulesetLoadError(f"cannot read bundled ruleset: {e}") from e
        return cls.from_text(text)

    # -- introspection -----------------------------------------------------

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    @property
    def icann_count(self) -> int:
        return self._icann_count

    @property
    def private_count(self) -> int:
        return len(self._rules) - self._icann_count

    def node_count(self) -> int:
        return self._trie.node_count()

    # -- lookups -----------------------------------------------------------

    def match(self, labels: LabelSequence) -> SuffixMatch:
        """Return the prevailing suffix match, or the default rule.

        The default rule treats the rightmost label as the public suffix
        and has no kind or section.
        """
        found = self._trie.longest_match(labels)
        return found if found is not None else DEFAULT_MATCH

    def match_naive(self, labels: LabelSequence) -> SuffixMatch:
        """Baseline: probe every trailing candidate against the flat map.

        O(n) dictionary probes per rule kind with a tuple slice per probe.
        Used to cross-check the trie; same semantics as match().
        """
        n = len(labels)
        # Exceptions prevail over everything; the trie meets the
        # shortest one first, so probe shortest first here too.
        for start in range(n - 1, -1, -1):
            rule = self._flat.get((RuleKind.EXCEPTION, labels[start:]))
            if rule is not None:
                return SuffixMatch(n - start - 1, RuleKind.EXCEPTION, rule.section)

        for start in range(n):
            candidate = labels[start:]
            if len(candidate) >= 2:
                rule = self._flat.get((RuleKind.WILDCARD, candidate[1:]))
                if rule is not None:
                    return SuffixMatch(len(candidate), RuleKind.WILDCARD, rule.section)
            rule = self._flat.get((RuleKind.NORMAL, candidate))
            if rule is not None:
                return SuffixMatch(len(candidate), RuleKind.NORMAL, rule.section)
        return DEFAULT_MATCH
