"""Label-level trie for reversed public-suffix matching.

Rules are split on "." and reversed before insertion so that the TLD
comes first: "kawasaki.jp" becomes ["jp", "kawasaki"]. Rules sharing a
TLD share the path down to where they diverge, and a hostname is
matched by one walk from its TLD inward, which tests every trailing
candidate suffix in a single pass.

Each node carries the kind of rule that terminates there, if any:
  - NORMAL on the node of the rule's leftmost label
  - WILDCARD on a "*" child below the literal part
  - EXCEPTION on the node of the "!"-marked label

Kinds are resolved at one point, during the walk: at a given depth an
exception beats a wildcard, and a wildcard beats a normal rule.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from psl_lite.domain.rules import Rule, RuleKind, Section
from psl_lite.domain.types import LabelSequence

WILDCARD_KEY = "*"


@dataclass
class TrieNode:
    """A node in the suffix trie.

    children maps a label (or "*") to the next node.
    kind and section are set when a rule terminates here.
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    kind: RuleKind | None = None
    section: Section | None = None


@dataclass(frozen=True, slots=True)
class SuffixMatch:
    """Outcome of a longest-match lookup.

    length is the number of trailing hostname labels forming the public
    suffix. kind and section are None when no rule matched and the
    implicit default rule (rightmost label) applied.
    """
    length: int
    kind: RuleKind | None = None
    section: Section | None = None

    @property
    def is_default(self) -> bool:
        return self.kind is None


DEFAULT_MATCH = SuffixMatch(length=1)


class SuffixTrie:
    """Trie over reversed labels for PSL longest-match lookups."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._rule_count = 0

    @property
    def rule_count(self) -> int:
        return self._rule_count

    def insert(self, rule: Rule) -> bool:
        """Insert a rule. Returns False if a rule already ends on that node.

        Normal and exception rules end on the node of their leftmost
        label; wildcard rules end on a "*" child of their literal part.
        """
        node = self._root
        for label in reversed(rule.labels):
            child = node.children.get(label)
            if child is None:
                child = TrieNode()
                node.children[label] = child
            node = child
        if rule.kind is RuleKind.WILDCARD:
            wild = node.children.get(WILDCARD_KEY)
            if wild is None:
                wild = TrieNode()
                node.children[WILDCARD_KEY] = wild
            node = wild

        if node.kind is not None:
            return False
        node.kind = rule.kind
        node.section = rule.section
        self._rule_count += 1
        return True

    def longest_match(self, labels: LabelSequence) -> SuffixMatch | None:
        """Return the prevailing rule match for a label sequence.

        Walks from the TLD inward. At each depth:
          1. an exception on the literal child ends the walk; the suffix
             is everything above it
          2. otherwise a wildcard under the current node claims this label
          3. otherwise a normal rule on the literal child claims it
        Deeper matches replace shallower ones. Returns None when nothing
        matched at any depth.
        """
        node = self._root
        best: SuffixMatch | None = None
        depth = 0
        for label in reversed(labels):
            depth += 1
            child = node.children.get(label)
            if child is not None and child.kind is RuleKind.EXCEPTION:
                return SuffixMatch(depth - 1, RuleKind.EXCEPTION, child.section)

            wild = node.children.get(WILDCARD_KEY)
            if wild is not None and wild.kind is RuleKind.WILDCARD:
                best = SuffixMatch(depth, RuleKind.WILDCARD, wild.section)
            elif child is not None and child.kind is RuleKind.NORMAL:
                best = SuffixMatch(depth, RuleKind.NORMAL, child.section)

            if child is None:
                break
            node = child
        return best

    def node_count(self) -> int:
        """Count total nodes in the trie (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
