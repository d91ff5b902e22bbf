"""Resolver configuration and construction.

The RuleStore is built explicitly here, once, and handed to the
resolver. Nothing is loaded at import time, so a bad ruleset path fails
at the call site that asked for it.

Environment:
    PSL_LITE_RULESET      path to a PSL file (default: bundled snapshot)
    PSL_LITE_MAX_WORKERS  thread pool size for batch lookups (default: 1)
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from psl_lite.resolver.resolver import DomainResolver
from psl_lite.store.rule_store import RuleStore

log = logging.getLogger(__name__)

ENV_RULESET = "PSL_LITE_RULESET"
ENV_MAX_WORKERS = "PSL_LITE_MAX_WORKERS"


@dataclass(slots=True)
class ResolverConfig:
    """Where to load rules from and how wide batch lookups may fan out."""
    ruleset_path: Path | None = None
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolverConfig:
        env = os.environ if environ is None else environ
        raw_path = env.get(ENV_RULESET, "").strip()
        raw_workers = env.get(ENV_MAX_WORKERS, "").strip()
        try:
            max_workers = int(raw_workers) if raw_workers else 1
        except ValueError:
            raise ValueError(f"{ENV_MAX_WORKERS} must be an integer, got {raw_workers!r}") from None
        return cls(
            ruleset_path=Path(raw_path) if raw_path else None,
            max_workers=max_workers,
        )


def build_store(config: ResolverConfig) -> RuleStore:
    """Load the configured ruleset. Raises RulesetLoadError on failure."""
    if config.ruleset_path is None:
        log.debug("Using bundled public suffix list")
        return RuleStore.bundled()
    return RuleStore.from_path(config.ruleset_path)


def build_resolver(config: ResolverConfig | None = None) -> DomainResolver:
    """Construct a resolver over a freshly loaded RuleStore."""
    return DomainResolver(build_store(config or ResolverConfig()))
