"""SDK configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .client import DEFAULT_RETRIES, DEFAULT_TIMEOUT
from .webhooks import DEFAULT_TIMESTAMP_TOLERANCE


@dataclass(frozen=True)
class FamConfig:
    """Settings for a ``FamClient``.

    Attributes:
        base_url: API base URL
        token: Bearer token
        timeout: Request timeout in seconds
        retries: Retries for transient failures
        headers: Headers added to every request
        webhook_secret: Shared secret for webhook signatures
        webhook_tolerance: Accepted webhook timestamp skew in seconds
    """

    base_url: str
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    headers: dict[str, str] = field(default_factory=dict)
    webhook_secret: Optional[str] = None
    webhook_tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE

    @classmethod
    def from_env(cls, prefix: str = "FAM_") -> "FamConfig":
        """Build a config from ``<prefix>BASE_URL``, ``<prefix>TOKEN``, etc.

        Raises:
            ValueError: If the base URL is missing or a number is malformed
        """
        base_url = os.getenv(f"{prefix}BASE_URL", "").strip()
        if not base_url:
            raise ValueError(f"{prefix}BASE_URL is required")

        return cls(
            base_url=base_url,
            token=os.getenv(f"{prefix}TOKEN") or None,
            timeout=_env_number(f"{prefix}TIMEOUT", float, DEFAULT_TIMEOUT),
            retries=_env_number(f"{prefix}RETRIES", int, DEFAULT_RETRIES),
            webhook_secret=os.getenv(f"{prefix}WEBHOOK_SECRET") or None,
            webhook_tolerance=_env_number(
                f"{prefix}WEBHOOK_TOLERANCE", int, DEFAULT_TIMESTAMP_TOLERANCE
            ),
        )


def _env_number(name: str, kind: type, default):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


__all__ = ["FamConfig"]
