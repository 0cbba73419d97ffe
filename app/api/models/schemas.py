from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

# ---------- Chat plan ----------


ChatRole = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    role: ChatRole
    content: str


class ChatPlanRequest(BaseModel):
    messages: Optional[List[ChatTurn]] = None


class DayPlan(BaseModel):
    day: int
    title: str
    activities: List[str]
    food_suggestions: str


class ItineraryPlan(BaseModel):
    """Shape the model is asked to produce. Not enforced on chat-plan replies."""

    destination: str
    days: int
    itinerary: List[DayPlan]


class ChatPlanResponse(BaseModel):
    assistant_message: Optional[str] = None
    # passed through as the model produced it
    plan: Optional[Any] = None


# ---------- Generators ----------


class GenerateTripRequest(BaseModel):
    destination: str = "your destination"
    days: int = 3


class PackingItem(BaseModel):
    text: str
    packed: bool = False


class PackingCategory(BaseModel):
    category: str
    items: List[PackingItem]


class PackingListResponse(BaseModel):
    packingList: List[PackingCategory]


class PackingListRequest(BaseModel):
    destination: Optional[str] = None
    duration: Optional[int | str] = None
    activities: Optional[str | List[str]] = None
    season: Optional[str] = None


class PromptRequest(BaseModel):
    prompt: str


class PromptResponse(BaseModel):
    text: str


# ---------- Hotels ----------


class HotelSummary(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    photoUrl: Optional[str] = None
    rating: Optional[float] = None
    reviewCount: int = 0
    price: str = "N/A"
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    url: Optional[str] = None


class HotelSearchResponse(BaseModel):
    data: List[HotelSummary]


class HotelDetails(BaseModel):
    id: str
    name: Optional[str] = None
    overview: Optional[str] = None
    rating: Optional[str] = None
    traveller_rating: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    reviews: Optional[str] = None
    url: Optional[str] = None


# ---------- Users ----------


class UserProfile(BaseModel):
    id: str
    uid: str
    displayName: str
    email: str
    photoURL: Optional[str] = None
    accessToken: Optional[str] = None


class UpdateProfileRequest(BaseModel):
    userId: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class UpdateProfileResponse(BaseModel):
    message: str
    user: UserProfile


class UpdatePasswordRequest(BaseModel):
    userId: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    message: str
    user: UserProfile
    token: str


# ---------- User documents ----------


DocumentCollection = Literal["trips", "savedHotels", "packingLists", "todos", "budgetPlanner"]


class UserDocumentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    data: Dict[str, Any]
    createdAt: datetime
    updatedAt: datetime


class UserDocumentList(BaseModel):
    data: List[UserDocumentModel]
