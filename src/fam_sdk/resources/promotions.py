"""Promotions resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource


class PromotionsResource(BaseResource):
    """
    Coupons and promotion codes.

    A coupon defines the discount (percent or fixed amount, and for how
    many billing cycles); promotion codes are the customer-facing strings
    that redeem a coupon.
    """

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/promotions")

    # ==================== Coupons ====================

    async def create_coupon(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a coupon.

        Example:
            ```python
            await fam.promotions.create_coupon({
                "name": "Launch Offer",
                "discountType": "fixed_amount",
                "amountOff": 1000,
                "currency": "EUR",
                "duration": "repeating",
                "durationInBillingCycles": 3,
            })
            ```
        """
        return await self._post("coupons", data)

    async def get_coupon(self, coupon_id: str) -> dict[str, Any]:
        return await self._get(f"coupons/{coupon_id}")

    async def list_coupons(
        self,
        is_active: Optional[bool] = None,
        discount_type: Optional[str] = None,
        duration: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            "coupons",
            params={
                "isActive": is_active,
                "discountType": discount_type,
                "duration": duration,
                "page": page,
                "per_page": per_page,
            },
        )

    async def update_coupon(self, coupon_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"coupons/{coupon_id}", data)

    async def delete_coupon(self, coupon_id: str) -> dict[str, Any]:
        """Delete a coupon and every promotion code attached to it."""
        return await self._delete(f"coupons/{coupon_id}")

    async def get_coupon_stats(self) -> dict[str, Any]:
        return await self._get("coupons/stats")

    # ==================== Promotion codes ====================

    async def create_promotion_code(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("codes", data)

    async def get_promotion_code(self, code_id: str) -> dict[str, Any]:
        return await self._get(f"codes/{code_id}")

    async def list_promotion_codes(
        self,
        coupon_id: Optional[str] = None,
        is_active: Optional[bool] = None,
        code: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            "codes",
            params={
                "couponId": coupon_id,
                "isActive": is_active,
                "code": code,
                "page": page,
                "per_page": per_page,
            },
        )

    async def update_promotion_code(self, code_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"codes/{code_id}", data)

    async def delete_promotion_code(self, code_id: str) -> dict[str, Any]:
        return await self._delete(f"codes/{code_id}")

    async def validate_code(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Check a code before applying it.

        Returns:
            ``valid`` plus, for valid codes, the computed discount
        """
        return await self._post("codes/validate", data)

    async def generate_codes(self, data: dict[str, Any]) -> dict[str, Any]:
        """Generate a batch of unique codes for a coupon."""
        return await self._post("codes/generate", data)

    async def find_by_code(self, code: str) -> dict[str, Any]:
        """Look a code up by its string, case-insensitively."""
        return await self._get(f"codes/by-code/{code}")
