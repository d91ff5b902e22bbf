"""Public suffix rule storage: PSL ingestion, trie, and the RuleStore."""

from psl_lite.store.loader import parse_rules, read_ruleset
from psl_lite.store.rule_store import RuleStore
from psl_lite.store.trie import DEFAULT_MATCH, SuffixMatch, SuffixTrie

__all__ = [
    "DEFAULT_MATCH",
    "RuleStore",
    "SuffixMatch",
    "SuffixTrie",
    "parse_rules",
    "read_ruleset",
]
