"""University CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import (
    MessageResponse,
    UniversityCreate,
    UniversityResponse,
    UniversityUpdate,
)
from intered.application.services import UniversityService
from intered.domain.exceptions import EntityNotFoundError
from intered.infrastructure.dependencies import get_university_service

router = APIRouter(prefix="/universities", tags=["Universities"])


@router.get("", response_model=list[UniversityResponse])
async def list_universities(
    service: UniversityService = Depends(get_university_service),
) -> list[UniversityResponse]:
    universities = await service.list_universities()
    return [UniversityResponse.model_validate(u) for u in universities]


@router.get("/{university_id}", response_model=UniversityResponse)
async def get_university(
    university_id: int,
    service: UniversityService = Depends(get_university_service),
) -> UniversityResponse:
    try:
        university = await service.get_university(university_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="University not found")
    return UniversityResponse.model_validate(university)


@router.post("", response_model=UniversityResponse, status_code=status.HTTP_201_CREATED)
async def create_university(
    data: UniversityCreate,
    service: UniversityService = Depends(get_university_service),
) -> UniversityResponse:
    university = await service.create_university(data)
    return UniversityResponse.model_validate(university)


@router.api_route("/{university_id}", methods=["PUT", "PATCH"], response_model=UniversityResponse)
async def update_university(
    university_id: int,
    data: UniversityUpdate,
    service: UniversityService = Depends(get_university_service),
) -> UniversityResponse:
    """Partial update; PUT and PATCH behave the same."""
    try:
        university = await service.update_university(university_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="University not found")
    return UniversityResponse.model_validate(university)


@router.delete("/{university_id}", response_model=MessageResponse)
async def delete_university(
    university_id: int,
    service: UniversityService = Depends(get_university_service),
) -> MessageResponse:
    try:
        await service.delete_university(university_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="University not found")
    return MessageResponse(message="University deleted successfully")
