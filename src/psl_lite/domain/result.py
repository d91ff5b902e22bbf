"""Classification result returned by the resolver."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Structural breakdown of one hostname.

    Parts that do not exist for a hostname are empty strings, e.g.
    registered_domain for the bare suffix "co.uk". The raw input is kept
    for reporting but takes no part in equality.
    """
    input: str = field(compare=False)
    hostname: str
    registered_domain: str
    subdomain: str
    public_suffix: str
    top_level_domain: str
    domain_without_suffix: str
    is_valid: bool
    is_icann: bool

    def as_dict(self) -> dict[str, Any]:
        """Render the camelCase record used by dispatch layers."""
        return {
            "input": self.input,
            "hostname": self.hostname,
            "registeredDomain": self.registered_domain,
            "subdomain": self.subdomain,
            "publicSuffix": self.public_suffix,
            "topLevelDomain": self.top_level_domain,
            "domainWithoutSuffix": self.domain_without_suffix,
            "isValid": self.is_valid,
            "isICANN": self.is_icann,
        }
