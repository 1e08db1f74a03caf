"""
Provider selection policy.

Computed once from the credentials present at start-up and passed into
the engine as an immutable value, so the policy can be tested without
touching the environment.
"""

from dataclasses import dataclass
from typing import Collection, Optional

from civic_triage.config import Settings


SARVAM = "sarvam"
OPENROUTER = "openrouter"
PROVIDERS = (SARVAM, OPENROUTER)


@dataclass(frozen=True)
class ProviderSelection:
    """
    Which provider goes first, which goes second.

    Attributes:
        preferred: First-preference provider, used as primary when configured
        configured: Providers that have a credential
        providers: All known providers (exactly two)
    """

    preferred: str = SARVAM
    configured: frozenset[str] = frozenset()
    providers: tuple[str, str] = PROVIDERS

    def __post_init__(self) -> None:
        if self.preferred not in self.providers:
            raise ValueError(
                f"preferred provider '{self.preferred}' must be one of {self.providers}"
            )
        unknown = set(self.configured) - set(self.providers)
        if unknown:
            raise ValueError(f"unknown configured providers: {sorted(unknown)}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderSelection":
        credentials = {
            SARVAM: settings.SARVAM_API_KEY,
            OPENROUTER: settings.OPENROUTER_API_KEY,
        }
        return cls(
            preferred=settings.PREFERRED_PROVIDER.strip().lower(),
            configured=frozenset(name for name, key in credentials.items() if key),
        )

    def other_than(self, provider: str) -> str:
        first, second = self.providers
        return second if provider == first else first

    def is_configured(self, provider: Optional[str]) -> bool:
        return provider is not None and provider in self.configured

    @property
    def primary(self) -> Optional[str]:
        """Preferred provider if it has a key, else the other one if it does."""
        if self.preferred in self.configured:
            return self.preferred
        other = self.other_than(self.preferred)
        return other if other in self.configured else None

    @property
    def secondary(self) -> Optional[str]:
        """The provider that did not get the first shot (may be unconfigured)."""
        if self.primary is None:
            return None
        return self.other_than(self.primary)

    def retry_target(self, last_failed: str, tried: Collection[str]) -> Optional[str]:
        """
        Provider for the last-resort retry after ``last_failed`` gave nothing.

        Only the provider that has not been called yet qualifies, and only
        when it has a key. A provider is never called twice for one
        complaint, so with a single key configured there is no retry.
        """
        candidate = self.other_than(last_failed)
        if candidate in tried or not self.is_configured(candidate):
            return None
        return candidate
