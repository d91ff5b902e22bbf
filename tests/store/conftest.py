"""Shared fixtures for rule store tests."""

from __future__ import annotations

import pytest

from psl_lite.store.rule_store import RuleStore

SMALL_RULESET = """\
// Hand-written ruleset covering every rule kind.

// ===BEGIN ICANN DOMAINS===
com
uk
co.uk
jp
*.kawasaki.jp
!city.kawasaki.jp
*.ck
!www.ck
// ===END ICANN DOMAINS===

// ===BEGIN PRIVATE DOMAINS===
blogspot.com
s3.amazonaws.com
*.compute.amazonaws.com
// ===END PRIVATE DOMAINS===
"""

# Hostnames exercising normal, wildcard, exception, private and
# unlisted paths through the store.
HOSTNAMES = [
    "example.com",
    "www.example.com",
    "com",
    "bbc.co.uk",
    "news.bbc.co.uk",
    "co.uk",
    "uk",
    "foo.kawasaki.jp",
    "a.foo.kawasaki.jp",
    "city.kawasaki.jp",
    "www.city.kawasaki.jp",
    "kawasaki.jp",
    "www.ck",
    "a.www.ck",
    "other.ck",
    "a.other.ck",
    "ck",
    "me.blogspot.com",
    "blogspot.com",
    "bucket.s3.amazonaws.com",
    "amazonaws.com",
    "ec2-1.eu-west-1.compute.amazonaws.com",
    "localhost",
    "host.localdomain",
    "invalid..com",
]


@pytest.fixture
def small_store() -> RuleStore:
    return RuleStore.from_text(SMALL_RULESET)


@pytest.fixture(scope="session")
def bundled_store() -> RuleStore:
    return RuleStore.bundled()


@pytest.fixture
def hostnames() -> list[str]:
    return list(HOSTNAMES)
