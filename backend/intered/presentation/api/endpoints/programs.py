"""Program endpoints: programs belong to a university."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import ProgramCreate, ProgramResponse
from intered.application.services import UniversityService
from intered.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from intered.infrastructure.dependencies import get_university_service

router = APIRouter(prefix="/programs", tags=["Programs"])


@router.get("", response_model=list[ProgramResponse])
async def list_programs(
    service: UniversityService = Depends(get_university_service),
) -> list[ProgramResponse]:
    return [ProgramResponse.model_validate(p) for p in await service.list_programs()]


@router.get("/university/{university_id}", response_model=list[ProgramResponse])
async def list_programs_for_university(
    university_id: int,
    service: UniversityService = Depends(get_university_service),
) -> list[ProgramResponse]:
    programs = await service.list_programs_for_university(university_id)
    return [ProgramResponse.model_validate(p) for p in programs]


@router.get("/{program_id}", response_model=ProgramResponse)
async def get_program(
    program_id: int,
    service: UniversityService = Depends(get_university_service),
) -> ProgramResponse:
    try:
        program = await service.get_program(program_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Program not found")
    return ProgramResponse.model_validate(program)


@router.post("", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED)
async def create_program(
    data: ProgramCreate,
    service: UniversityService = Depends(get_university_service),
) -> ProgramResponse:
    try:
        program = await service.create_program(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProgramResponse.model_validate(program)
