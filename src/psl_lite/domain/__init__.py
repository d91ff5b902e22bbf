"""Domain model for psl-lite.

Re-exports all public types for convenient access:
    from psl_lite.domain import Rule, RuleKind, Section, ClassificationResult
"""
from psl_lite.domain.errors import (
    DomainClassificationError,
    EmptyInput,
    NoPublicSuffixDetermined,
    NoRegisteredDomain,
    RulesetLoadError,
)
from psl_lite.domain.result import ClassificationResult
from psl_lite.domain.rules import Rule, RuleKind, Section
from psl_lite.domain.types import Hostname, Label, LabelSequence

__all__ = [
    "ClassificationResult",
    "DomainClassificationError",
    "EmptyInput",
    "NoPublicSuffixDetermined",
    "NoRegisteredDomain",
    "RulesetLoadError",
    "Rule",
    "RuleKind",
    "Section",
    "Hostname",
    "Label",
    "LabelSequence",
]
