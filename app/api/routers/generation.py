from typing import Any

from fastapi import APIRouter, Depends

from app.api.models.schemas import (
    GenerateTripRequest,
    ItineraryPlan,
    PackingListRequest,
    PackingListResponse,
    PromptRequest,
    PromptResponse,
)
from app.dependencies import get_generation_service
from app.domain.services.generation_service import GenerationService

router = APIRouter(tags=["generation"])


# The documented models describe what the model is asked for; the parsed
# reply is returned as-is.
@router.post("/generate-trip", responses={200: {"model": ItineraryPlan}})
async def generate_trip(
    body: GenerateTripRequest, svc: GenerationService = Depends(get_generation_service)
) -> Any:
    return await svc.generate_trip(body)


@router.post("/generate-packing-list", responses={200: {"model": PackingListResponse}})
async def generate_packing_list(
    body: PackingListRequest, svc: GenerationService = Depends(get_generation_service)
) -> Any:
    return await svc.generate_packing_list(body)


@router.post("/gemini", response_model=PromptResponse)
async def gemini(body: PromptRequest, svc: GenerationService = Depends(get_generation_service)):
    return PromptResponse(text=await svc.ask_gemini(body.prompt))


@router.post("/cohere", response_model=PromptResponse)
async def cohere(body: PromptRequest, svc: GenerationService = Depends(get_generation_service)):
    return PromptResponse(text=await svc.ask_cohere(body.prompt))
