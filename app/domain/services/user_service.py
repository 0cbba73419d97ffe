from __future__ import annotations

import logging
from typing import Tuple

from app.api.models.schemas import LoginRequest, UpdatePasswordRequest, UpdateProfileRequest
from app.core.errors import UnauthorizedError, ValidationError
from app.core.security import get_password_hash, verify_password
from app.domain.models import UserEntity
from app.domain.repositories import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def get_profile(self, user_id: str) -> UserEntity:
        return await self.repo.get(user_id)

    async def update_profile(self, body: UpdateProfileRequest) -> UserEntity:
        if not body.userId:
            raise ValidationError("User ID is required", {"field": "userId", "reason": "required"})

        user = await self.repo.get(body.userId)
        if body.email:
            owner = await self.repo.find_by_email(body.email)
            if owner is not None and owner.id != user.id:
                raise ValidationError("Email already exists", {"field": "email", "reason": "taken"})

        if body.name:
            user.display_name = body.name
        if body.email:
            user.email = body.email

        await self.repo.update(user)
        logger.info("Profile updated for user %s", body.userId)
        return user

    async def update_password(self, body: UpdatePasswordRequest) -> None:
        if not (body.userId and body.currentPassword and body.newPassword):
            raise ValidationError("User ID, current password, and new password are required")

        user = await self.repo.get(body.userId)
        if not verify_password(body.currentPassword, user.password_hash):
            raise ValidationError("Current password is incorrect", {"field": "currentPassword", "reason": "mismatch"})
        if len(body.newPassword) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters long",
                {"field": "newPassword", "reason": "too short"},
            )

        user.password_hash = get_password_hash(body.newPassword)
        await self.repo.update(user)
        logger.info("Password updated for user %s", body.userId)

    async def login(self, body: LoginRequest) -> Tuple[UserEntity, str]:
        user = await self.repo.find_by_email(body.email)
        if user is None or not verify_password(body.password, user.password_hash):
            raise UnauthorizedError("Invalid credentials")
        return user, f"mock-token-{user.id}"
