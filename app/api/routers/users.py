from fastapi import APIRouter, Depends

from app.api.models.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UpdatePasswordRequest,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UserProfile,
)
from app.core.errors import NotFoundError
from app.dependencies import get_user_service
from app.domain.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.put("/user/update-profile", response_model=UpdateProfileResponse)
async def update_profile(body: UpdateProfileRequest, svc: UserService = Depends(get_user_service)):
    try:
        user = await svc.update_profile(body)
    except KeyError:
        raise NotFoundError("User not found")
    return UpdateProfileResponse(message="Profile updated successfully", user=user.to_api_model())


@router.post("/user/update-password", response_model=MessageResponse)
async def update_password(body: UpdatePasswordRequest, svc: UserService = Depends(get_user_service)):
    try:
        await svc.update_password(body)
    except KeyError:
        raise NotFoundError("User not found")
    return MessageResponse(message="Password updated successfully")


@router.get("/user/profile/{user_id}", response_model=UserProfile)
async def get_profile(user_id: str, svc: UserService = Depends(get_user_service)):
    try:
        user = await svc.get_profile(user_id)
    except KeyError:
        raise NotFoundError("User not found")
    return user.to_api_model()


@router.post("/auth/login", response_model=LoginResponse)
async def login(body: LoginRequest, svc: UserService = Depends(get_user_service)):
    user, token = await svc.login(body)
    return LoginResponse(message="Login successful", user=user.to_api_model(), token=token)
