"""Application endpoints: CRUD plus the stage/student/university/program filters."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    StudentApplicationResponse,
)
from intered.application.services import ApplicationService
from intered.domain.entities import ApplicationStage
from intered.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from intered.infrastructure.dependencies import get_application_service

router = APIRouter(prefix="/applications", tags=["Applications"])


def _responses(applications) -> list[ApplicationResponse]:
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.get("", response_model=list[ApplicationResponse])
async def list_applications(
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return _responses(await service.list_applications())


@router.get("/filter/stage/{stage}", response_model=list[ApplicationResponse])
async def list_applications_by_stage(
    stage: ApplicationStage,
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return _responses(await service.list_by_stage(stage.value))


@router.get("/student/{student_id}", response_model=list[StudentApplicationResponse])
async def list_applications_for_student(
    student_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> list[StudentApplicationResponse]:
    """Applications of one student with university and program names attached."""
    enriched = await service.list_for_student(student_id)
    return [
        StudentApplicationResponse.model_validate(
            {
                **ApplicationResponse.model_validate(item.application).model_dump(),
                "university_name": item.university_name,
                "program_name": item.program_name,
            }
        )
        for item in enriched
    ]


@router.get("/university/{university_id}", response_model=list[ApplicationResponse])
async def list_applications_for_university(
    university_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return _responses(await service.list_by_university(university_id))


@router.get("/program/{program_id}", response_model=list[ApplicationResponse])
async def list_applications_for_program(
    program_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationResponse]:
    return _responses(await service.list_by_program(program_id))


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    try:
        application = await service.get_application(application_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return ApplicationResponse.model_validate(application)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    data: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    try:
        application = await service.create_application(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApplicationResponse.model_validate(application)


@router.api_route("/{application_id}", methods=["PUT", "PATCH"], response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    data: ApplicationUpdate,
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    try:
        application = await service.update_application(application_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
) -> None:
    try:
        await service.delete_application(application_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
