"""psl-lite: classify hostnames and email addresses with the Public Suffix List.

    from psl_lite import DomainResolver, RuleStore
    resolver = DomainResolver(RuleStore.bundled())
    resolver.resolve("john@billing.acmecompany.com").registered_domain
    # "acmecompany.com"
"""
from psl_lite.config import ResolverConfig, build_resolver
from psl_lite.domain import (
    ClassificationResult,
    DomainClassificationError,
    EmptyInput,
    NoPublicSuffixDetermined,
    NoRegisteredDomain,
    Rule,
    RuleKind,
    RulesetLoadError,
    Section,
)
from psl_lite.resolver import DomainResolver, normalize_input
from psl_lite.store import RuleStore, SuffixMatch

__all__ = [
    "ClassificationResult",
    "DomainClassificationError",
    "DomainResolver",
    "EmptyInput",
    "NoPublicSuffixDetermined",
    "NoRegisteredDomain",
    "ResolverConfig",
    "Rule",
    "RuleKind",
    "RuleStore",
    "RulesetLoadError",
    "Section",
    "SuffixMatch",
    "build_resolver",
    "normalize_input",
]
