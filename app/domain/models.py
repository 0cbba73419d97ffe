from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping

# A CSV row exactly as read: every value is a string.
HotelRecord = Mapping[str, str]


@dataclass
class UserEntity:
    id: str
    uid: str
    display_name: str
    email: str
    password_hash: str
    photo_url: str | None = None
    access_token: str | None = None

    def matches(self, user_id: str) -> bool:
        return user_id in (self.id, self.uid)

    def to_api_model(self):
        from app.api.models.schemas import UserProfile

        return UserProfile(
            id=self.id,
            uid=self.uid,
            displayName=self.display_name,
            email=self.email,
            photoURL=self.photo_url,
            accessToken=self.access_token,
        )


@dataclass
class UserDocumentEntity:
    id: str
    user_id: str
    collection: str
    data: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def to_api_model(self):
        from app.api.models.schemas import UserDocumentModel

        return UserDocumentModel(
            id=self.id,
            data=self.data,
            createdAt=self.created_at,
            updatedAt=self.updated_at,
        )
