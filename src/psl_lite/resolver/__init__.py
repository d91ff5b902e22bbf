"""Domain resolution: normalization, classification and batch lookups."""
from psl_lite.resolver.batch import resolve_many
from psl_lite.resolver.normalize import normalize_input, split_labels
from psl_lite.resolver.resolver import DomainResolver

__all__ = [
    "DomainResolver",
    "normalize_input",
    "resolve_many",
    "split_labels",
]
