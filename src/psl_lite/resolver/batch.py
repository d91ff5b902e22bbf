"""Batch resolution: many inputs -> registered domains.

Each input is an independent call to DomainResolver.resolve. Inputs
that are empty, unclassifiable or invalid are skipped, so one bad row
never aborts a batch. With max_workers > 1 the calls fan out over a
ThreadPoolExecutor; pool.map keeps results in input order, so
deduplication still preserves first-seen order.

The resolver and its RuleStore are read-only, so workers share them
without locking. The dedup mapping belongs to this call alone.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from psl_lite.domain.errors import DomainClassificationError

if TYPE_CHECKING:
    from psl_lite.resolver.resolver import DomainResolver

log = logging.getLogger(__name__)


def _registered_or_none(resolver: DomainResolver, raw: str) -> str | None:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        result = resolver.resolve(raw)
    except DomainClassificationError as e:
        log.debug("Skipping %r: %s", raw, e)
        return None
    if not result.is_valid:
        log.debug("Skipping %r: no registered domain", raw)
        return None
    return result.registered_domain


def resolve_many(
    resolver: DomainResolver,
    raw_inputs: Iterable[str],
    unique_only: bool = True,
    max_workers: int | None = None,
) -> list[str]:
    """Return the registered domain of every valid input.

    Args:
        resolver: shared resolver used for every input
        raw_inputs: email addresses or hostnames; None/empty entries skipped
        unique_only: drop repeats, keeping the first occurrence
        max_workers: thread pool size; None or 1 resolves inline
    """
    items = list(raw_inputs or [])
    if not items:
        return []

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            found = list(pool.map(lambda raw: _registered_or_none(resolver, raw), items))
    else:
        found = [_registered_or_none(resolver, raw) for raw in items]

    domains = [d for d in found if d is not None]
    log.debug("Resolved %d of %d inputs", len(domains), len(items))
    if unique_only:
        return list(dict.fromkeys(domains))
    return domains
