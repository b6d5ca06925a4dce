"""
Shops module.

Pet shops and clinics shown on the map, managed by administrators.

Public API:
- IShopService: Interface for shop operations
- ShopRepository: Data access for the shops table
- Shop, ShopRequest: Models
- ShopNotFoundError
"""

from .interfaces import IShopService
from .models import Shop, ShopRequest
from .repository import ShopRepository
from .exceptions import ShopNotFoundError

__all__ = [
    "IShopService",
    "ShopRepository",
    "Shop",
    "ShopRequest",
    "ShopNotFoundError",
]
