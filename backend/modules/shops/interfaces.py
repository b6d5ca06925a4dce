"""
Shops module interface.

Write operations are for administrators; the admin check happens in
the API layer before these methods are called.
"""

from typing import Protocol, runtime_checkable

from shared.models import DataResponse, Envelope

from .models import Shop, ShopRequest


@runtime_checkable
class IShopService(Protocol):
    """Interface for shop listings."""

    async def list_shops(self) -> DataResponse[list[Shop]]:
        ...

    async def create_shop(self, request: ShopRequest) -> DataResponse[Shop]:
        ...

    async def update_shop(self, shop_id: int, request: ShopRequest) -> DataResponse[Shop]:
        """Replace a shop's details, keeping its image unless a new one is given."""
        ...

    async def delete_shop(self, shop_id: int) -> Envelope:
        ...
