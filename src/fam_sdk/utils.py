"""
Helpers shared by the FAM SDK.

- ``build_url``: base URL + path + query parameters
- ``retry``: exponential backoff around an awaitable factory
- ``format_amount`` / ``parse_amount``: cents <-> display amounts
"""
from __future__ import annotations

import asyncio
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar, Union
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryValue = Union[str, int, float, bool, None]
QueryParams = Mapping[str, QueryValue]

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY = 1.0
DEFAULT_MAX_DELAY = 30.0


async def sleep(seconds: float) -> None:
    """Suspend the current task for ``seconds``."""
    await asyncio.sleep(seconds)


async def retry(
    operation: Callable[[], Awaitable[T]],
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    should_retry: Optional[Callable[[Exception], bool]] = None,
) -> T:
    """Run ``operation`` until it succeeds or retries are exhausted.

    The operation is attempted at most ``max_retries + 1`` times. After the
    failure of attempt ``i`` (0-based) the task sleeps for
    ``min(base_delay * 2 ** i, max_delay)`` seconds before trying again.
    No jitter is applied.

    Args:
        operation: Zero-argument callable returning a fresh awaitable
        max_retries: Retries after the initial attempt
        base_delay: Delay before the first retry, in seconds
        max_delay: Upper bound for any single delay, in seconds
        should_retry: Predicate deciding whether an error is retried.
            Every error is retried when omitted.

    Returns:
        The result of the first successful attempt

    Raises:
        The error of the last attempt, unchanged.
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt >= max_retries:
                raise
            if should_retry is not None and not should_retry(e):
                logger.debug(
                    "%s is not retryable, raising immediately", type(e).__name__
                )
                raise

            delay = min(base_delay * (2 ** attempt), max_delay)
            logger.warning(
                "Retry %d/%d after %s: %s. Waiting %.2fs",
                attempt + 1,
                max_retries,
                type(e).__name__,
                e,
                delay,
            )
            await sleep(delay)
            attempt += 1


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_url(base_url: str, path: str, params: Optional[QueryParams] = None) -> str:
    """Build a request URL.

    ``path`` is resolved against ``base_url`` with standard URL rules, so a
    path starting with ``/`` replaces the base URL's path. Parameters whose
    value is ``None`` are left out; the rest keep their insertion order.

    Example:
        >>> build_url("https://api.example.com", "/users", {"page": 1, "q": None})
        'https://api.example.com/users?page=1'
    """
    url = urljoin(base_url, path)
    if not params:
        return url

    pairs = [(key, _query_value(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return url

    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True) + pairs
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


# fr-FR rendering: narrow no-break space groups thousands, the currency
# follows the amount after a no-break space.
_GROUP_SEPARATOR = "\u202f"
_CURRENCY_SPACING = "\u00a0"

_CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$US",
    "GBP": "£GB",
    "CAD": "$CA",
    "AUD": "$AU",
}

_ZERO_DECIMAL_CURRENCIES = {"JPY"}


def format_amount(amount_in_cents: int, currency: str = "EUR") -> str:
    """Format an amount in cents for display, French locale.

    ``format_amount(123456)`` gives the same string a browser's ``fr-FR``
    currency formatter renders for 1234.56 EUR.
    """
    digits = 0 if currency in _ZERO_DECIMAL_CURRENCIES else 2
    quantum = Decimal(1).scaleb(-digits)
    amount = (Decimal(amount_in_cents) / 100).quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):f}".partition(".")
    grouped = f"{int(whole):,}".replace(",", _GROUP_SEPARATOR)
    number = f"{grouped},{fraction}" if fraction else grouped

    symbol = _CURRENCY_SYMBOLS.get(currency, currency)
    return f"{sign}{number}{_CURRENCY_SPACING}{symbol}"


def parse_amount(amount: Union[int, float, str, Decimal]) -> int:
    """Convert a major-unit amount (``12.34``) to cents (``1234``)."""
    cents = (Decimal(str(amount)) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(cents)


__all__ = [
    "build_url",
    "format_amount",
    "parse_amount",
    "retry",
    "sleep",
]
