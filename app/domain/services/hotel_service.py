from __future__ import annotations

import math
from typing import List, Optional

from app.api.models.schemas import HotelDetails, HotelSummary
from app.core.errors import NotFoundError, ValidationError
from app.domain.models import HotelRecord
from app.domain.repositories import HotelCatalog


def _parse_rating(value: str | None) -> Optional[float]:
    try:
        rating = float((value or "").strip())
    except ValueError:
        return None
    return rating if math.isfinite(rating) else None


def _parse_count(value: str | None) -> int:
    try:
        count = float((value or "").replace(",", "").strip())
    except ValueError:
        return 0
    return int(count) if math.isfinite(count) else 0


def _first_photo(image_urls: str | None) -> Optional[str]:
    first = (image_urls or "").split(",")[0].strip()
    return first or None


def to_summary(row: HotelRecord) -> HotelSummary:
    return HotelSummary(
        id=row.get("property_id"),
        name=row.get("property_name"),
        photoUrl=_first_photo(row.get("image_urls")),
        rating=_parse_rating(row.get("site_review_rating")),
        reviewCount=_parse_count(row.get("site_review_count")),
        price=row.get("highlight_value") or "N/A",
        address=row.get("property_address"),
        city=row.get("city"),
        state=row.get("state"),
        url=row.get("pageurl"),
    )


def to_details(row: HotelRecord) -> HotelDetails:
    return HotelDetails(
        id=row["property_id"],
        name=row.get("property_name"),
        overview=row.get("hotel_overview"),
        rating=row.get("hotel_star_rating"),
        traveller_rating=row.get("traveller_rating"),
        address=row.get("property_address"),
        city=row.get("city"),
        state=row.get("state"),
        reviews=row.get("site_review_count"),
        url=row.get("pageurl"),
    )


class HotelService:
    def __init__(self, catalog: HotelCatalog, limit: int = 20):
        self.catalog = catalog
        self.limit = limit

    def search(self, city: str | None, area: str | None) -> List[HotelSummary]:
        if not city and not area:
            raise ValidationError(
                "City or area is required", {"field": "city", "reason": "Provide city or area."}
            )
        return [to_summary(row) for row in self.catalog.search(city, area, self.limit)]

    def get_details(self, hotel_id: str) -> HotelDetails:
        try:
            row = self.catalog.get(hotel_id)
        except KeyError:
            raise NotFoundError("Hotel not found")
        return to_details(row)
