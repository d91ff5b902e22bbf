"""Domain resolver: normalized hostname + RuleStore -> ClassificationResult.

The central classification logic:
  1. Normalize the raw input and split it into labels
  2. Ask the RuleStore for the prevailing suffix match (k labels)
  3. Cut the labels into subdomain / registrable label / public suffix
  4. Decide validity: a registrable label must exist, the suffix must
     come from a listed rule, and no label may be empty

Thread safety: DomainResolver only holds a reference to an immutable
RuleStore. Every method is a pure function of its arguments, so one
instance can be shared across all worker threads.
"""
from __future__ import annotations

from collections.abc import Iterable

from psl_lite.domain.errors import (
    DomainClassificationError,
    NoPublicSuffixDetermined,
    NoRegisteredDomain,
)
from psl_lite.domain.result import ClassificationResult
from psl_lite.domain.rules import Section
from psl_lite.domain.types import Hostname
from psl_lite.resolver.batch import resolve_many
from psl_lite.resolver.normalize import normalize_input, split_labels
from psl_lite.store.rule_store import RuleStore
from psl_lite.store.trie import SuffixMatch


class DomainResolver:
    """Classify hostnames and email addresses against a RuleStore.

    Usage:
        resolver = DomainResolver(RuleStore.bundled())
        resolver.resolve("support@subdomain.techcorp.co.uk").registered_domain
        # "techcorp.co.uk"
    """

    def __init__(self, store: RuleStore) -> None:
        self._store = store

    @property
    def store(self) -> RuleStore:
        return self._store

    def resolve(self, raw_input: str) -> ClassificationResult:
        """Classify a raw email address or hostname.

        Raises EmptyInput if nothing is left after normalization. Any
        other input produces a result, possibly with is_valid=False.
        """
        hostname = normalize_input(raw_input)
        result, _ = self._classify(hostname, raw_input.strip())
        return result

    def resolve_hostname(self, hostname: Hostname) -> ClassificationResult:
        """Classify an already-normalized hostname."""
        result, _ = self._classify(hostname, hostname)
        return result

    def is_valid_domain(self, raw_input: str) -> bool:
        """True if the input carries a registrable domain under a listed suffix.

        Never raises: empty, non-string or unclassifiable input is False.
        """
        if not isinstance(raw_input, str) or not raw_input:
            return False
        try:
            return self.resolve(raw_input).is_valid
        except DomainClassificationError:
            return False

    def registered_domain(self, raw_input: str) -> str:
        """Strict eTLD+1 lookup.

        Raises EmptyInput, or NoRegisteredDomain when the hostname has no
        registrable boundary under a listed suffix.
        """
        hostname = normalize_input(raw_input)
        result, match = self._classify(hostname, raw_input.strip())
        if match.is_default:
            raise NoRegisteredDomain(f"Invalid domain: {hostname}", hostname)
        if not result.is_valid:
            raise NoRegisteredDomain(
                f"Could not determine registered domain for: {hostname}", hostname
            )
        return result.registered_domain

    def public_suffix(self, raw_input: str) -> str:
        """Strict public suffix lookup.

        Raises EmptyInput, or NoPublicSuffixDetermined when only the
        implicit default rule matched or the suffix has an empty label.
        A bare suffix such as "co.uk" is accepted.
        """
        hostname = normalize_input(raw_input)
        result, match = self._classify(hostname, raw_input.strip())
        if match.is_default:
            raise NoPublicSuffixDetermined(f"Invalid domain: {hostname}", hostname)
        if not result.public_suffix or "" in result.public_suffix.split("."):
            raise NoPublicSuffixDetermined(
                f"Could not determine public suffix for: {hostname}", hostname
            )
        return result.public_suffix

    def resolve_many(
        self,
        raw_inputs: Iterable[str],
        unique_only: bool = True,
        max_workers: int | None = None,
    ) -> list[str]:
        """Registered domains of every valid input. See batch.resolve_many."""
        return resolve_many(self, raw_inputs, unique_only=unique_only, max_workers=max_workers)

    def _classify(
        self, hostname: Hostname, raw_input: str
    ) -> tuple[ClassificationResult, SuffixMatch]:
        labels = split_labels(hostname)
        match = self._store.match(labels)
        k = match.length

        suffix_labels = labels[len(labels) - k:]
        public_suffix = ".".join(suffix_labels)
        top_level_domain = suffix_labels[-1] if suffix_labels else ""

        registered_domain = ""
        domain_without_suffix = ""
        subdomain = ""
        if len(labels) > k:
            domain_without_suffix = labels[-k - 1]
            registered_domain = f"{domain_without_suffix}.{public_suffix}"
            subdomain = ".".join(labels[:-k - 1])

        is_valid = (
            len(labels) > k
            and not match.is_default
            and all(labels)
        )
        result = ClassificationResult(
            input=raw_input,
            hostname=hostname,
            registered_domain=registered_domain,
            subdomain=subdomain,
            public_suffix=public_suffix,
            top_level_domain=top_level_domain,
            domain_without_suffix=domain_without_suffix,
            is_valid=is_valid,
            is_icann=match.section is Section.ICANN,
        )
        return result, match
