"""
FAM SDK client.

Example usage:
    ```python
    from fam_sdk import FamClient

    async with FamClient(base_url="https://api.fam.example", token="...") as fam:
        user = await fam.users.create_natural({
            "FirstName": "Ada",
            "LastName": "Lovelace",
            "Email": "ada@example.com",
        })
        wallet = await fam.wallets.create({
            "Owners": [user["Id"]],
            "Currency": "EUR",
            "Description": "Main wallet",
        })
        ibans = fam.bank_accounts(user["Id"])
        await ibans.create_iban({...})
    ```
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from .client import DEFAULT_RETRIES, DEFAULT_TIMEOUT, HttpClient
from .config import FamConfig
from .resources import (
    BankAccountsResource,
    BundlesResource,
    CardRegistrationsResource,
    CardsResource,
    KycResource,
    PayinsResource,
    PayoutsResource,
    PortalResource,
    PreauthorizationsResource,
    ProductsResource,
    PromotionsResource,
    ScaRecipientsResource,
    SubscriptionsResource,
    TransfersResource,
    UboResource,
    UsersResource,
    WalletsResource,
)
from .webhooks import DEFAULT_TIMESTAMP_TOLERANCE, Webhooks

logger = logging.getLogger(__name__)


class FamClient:
    """
    Entry point of the SDK: one HTTP client, every API resource.

    Args:
        base_url: API base URL
        token: Bearer token
        timeout: Request timeout in seconds (default: 30)
        retries: Retries for transient failures (default: 3)
        headers: Headers added to every request
        webhook_secret: Shared secret used by ``webhooks``
        webhook_tolerance: Accepted webhook timestamp skew in seconds
        transport: Optional httpx transport
        config: A ``FamConfig``; keyword arguments are ignored when given
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        headers: Optional[Mapping[str, str]] = None,
        webhook_secret: Optional[str] = None,
        webhook_tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        config: Optional[FamConfig] = None,
    ):
        if config is None:
            if not base_url:
                raise ValueError("Base URL is required")
            config = FamConfig(
                base_url=base_url,
                token=token,
                timeout=timeout,
                retries=retries,
                headers=dict(headers or {}),
                webhook_secret=webhook_secret,
                webhook_tolerance=webhook_tolerance,
            )
        self._config = config

        self._http = HttpClient(
            base_url=config.base_url,
            token=config.token,
            timeout=config.timeout,
            retries=config.retries,
            headers=config.headers,
            transport=transport,
        )

        # MangoPay
        self.users = UsersResource(self._http)
        self.wallets = WalletsResource(self._http)
        self.payins = PayinsResource(self._http)
        self.payouts = PayoutsResource(self._http)
        self.transfers = TransfersResource(self._http)
        self.cards = CardsResource(self._http)
        self.card_registrations = CardRegistrationsResource(self._http)
        self.preauthorizations = PreauthorizationsResource(self._http)

        # FAM
        self.subscriptions = SubscriptionsResource(self._http)
        self.bundles = BundlesResource(self._http)
        self.products = ProductsResource(self._http)
        self.promotions = PromotionsResource(self._http)
        self.portal = PortalResource(self._http)

        self.webhooks = Webhooks(
            signing_secret=config.webhook_secret,
            timestamp_tolerance=config.webhook_tolerance,
        )

        logger.debug("FAM client ready for %s", self._http.base_url)

    @classmethod
    def from_env(
        cls,
        prefix: str = "FAM_",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "FamClient":
        """Build a client from ``FAM_*`` environment variables."""
        return cls(config=FamConfig.from_env(prefix), transport=transport)

    @property
    def config(self) -> FamConfig:
        return self._config

    @property
    def http(self) -> HttpClient:
        """The underlying HTTP client, for endpoints without a resource."""
        return self._http

    # Per-user resources

    def bank_accounts(self, user_id: str) -> BankAccountsResource:
        return BankAccountsResource(self._http, user_id)

    def kyc(self, user_id: str) -> KycResource:
        return KycResource(self._http, user_id)

    def ubo(self, user_id: str) -> UboResource:
        return UboResource(self._http, user_id)

    def sca_recipients(self, user_id: str) -> ScaRecipientsResource:
        return ScaRecipientsResource(self._http, user_id)

    def set_token(self, token: str) -> None:
        """Set the bearer token used by subsequent requests."""
        self._http.set_token(token)

    def clear_token(self) -> None:
        self._http.clear_token()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.close()

    async def __aenter__(self) -> "FamClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
