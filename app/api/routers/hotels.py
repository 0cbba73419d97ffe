from typing import Optional

from fastapi import APIRouter, Depends

from app.api.models.schemas import HotelDetails, HotelSearchResponse
from app.dependencies import get_hotel_service
from app.domain.services.hotel_service import HotelService

router = APIRouter(tags=["hotels"])


@router.get("/search-hotels", response_model=HotelSearchResponse)
async def search_hotels(
    city: Optional[str] = None,
    area: Optional[str] = None,
    svc: HotelService = Depends(get_hotel_service),
):
    return HotelSearchResponse(data=svc.search(city, area))


@router.get("/hotel-details/{hotel_id}", response_model=HotelDetails)
async def hotel_details(hotel_id: str, svc: HotelService = Depends(get_hotel_service)):
    return svc.get_details(hotel_id)
