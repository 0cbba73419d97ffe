from fastapi import APIRouter, Depends

from app.api.models.schemas import ChatPlanRequest, ChatPlanResponse
from app.dependencies import get_chat_plan_service
from app.domain.services.chat_plan_service import ChatPlanService

router = APIRouter(tags=["chat"])


@router.post("/chat-plan", response_model=ChatPlanResponse)
async def chat_plan(body: ChatPlanRequest, svc: ChatPlanService = Depends(get_chat_plan_service)):
    return await svc.plan(body.messages or [])
