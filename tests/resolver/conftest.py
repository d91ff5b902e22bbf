"""Shared fixtures for resolver tests."""

from __future__ import annotations

import pytest

from psl_lite.resolver.resolver import DomainResolver
from psl_lite.store.rule_store import RuleStore


@pytest.fixture(scope="session")
def resolver() -> DomainResolver:
    """One resolver over the bundled list, shared like it would be in production."""
    return DomainResolver(RuleStore.bundled())


@pytest.fixture
def foo_resolver() -> DomainResolver:
    return DomainResolver(RuleStore.from_text("*.foo\n!bar.foo\n"))
