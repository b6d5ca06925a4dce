"""
Shop API endpoints.

Anyone signed in can browse shops; only administrators can change them.
"""

from fastapi import APIRouter, Depends, status

from modules.shops.interfaces import IShopService
from modules.shops.models import Shop, ShopRequest
from shared.models import AuthenticatedUser, DataResponse, Envelope

from ..dependencies import get_shop_service
from ..middleware.auth import get_current_user, require_admin

router = APIRouter()


@router.get("", response_model=DataResponse[list[Shop]])
async def list_shops(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IShopService = Depends(get_shop_service),
) -> DataResponse[list[Shop]]:
    return await service.list_shops()


@router.post("", response_model=DataResponse[Shop], status_code=status.HTTP_201_CREATED)
async def create_shop(
    request: ShopRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IShopService = Depends(get_shop_service),
) -> DataResponse[Shop]:
    return await service.create_shop(request)


@router.put("/{shop_id}", response_model=DataResponse[Shop])
async def update_shop(
    shop_id: int,
    request: ShopRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IShopService = Depends(get_shop_service),
) -> DataResponse[Shop]:
    return await service.update_shop(shop_id, request)


@router.delete("/{shop_id}", response_model=Envelope)
async def delete_shop(
    shop_id: int,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IShopService = Depends(get_shop_service),
) -> Envelope:
    return await service.delete_shop(shop_id)
