"""
Shops module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError


class ShopNotFoundError(NotFoundError):
    """Raised when a shop does not exist."""

    def __init__(self, shop_id: Any):
        super().__init__("Shop not found", code="SHOP_NOT_FOUND", details={"shop_id": shop_id})
