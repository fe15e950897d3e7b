"""
Resources for the FAM SDK.

MangoPay proxy resources plus the FAM-specific subscription, bundle,
product, promotion and portal APIs.
"""
from .base import BaseResource, pagination_params
from .users import UsersResource
from .wallets import WalletsResource
from .payins import PayinsResource
from .payouts import PayoutsResource
from .transfers import TransfersResource
from .cards import CardRegistrationsResource, CardsResource, PreauthorizationsResource
from .bank_accounts import BankAccountsResource
from .kyc import KycResource
from .ubo import UboResource
from .recipients import ScaRecipientsResource
from .subscriptions import SubscriptionsResource
from .bundles import BundlesResource
from .products import ProductsResource
from .promotions import PromotionsResource
from .portal import PortalResource

__all__ = [
    # Base
    "BaseResource",
    "pagination_params",
    # MangoPay
    "UsersResource",
    "WalletsResource",
    "PayinsResource",
    "PayoutsResource",
    "TransfersResource",
    "CardRegistrationsResource",
    "CardsResource",
    "PreauthorizationsResource",
    "BankAccountsResource",
    "KycResource",
    "UboResource",
    "ScaRecipientsResource",
    # FAM
    "SubscriptionsResource",
    "BundlesResource",
    "ProductsResource",
    "PromotionsResource",
    "PortalResource",
]
