"""Student endpoints: CRUD, stage filter and spreadsheet import."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from intered.config import get_settings
from intered.application.schemas import (
    StudentCreate,
    StudentImportResult,
    StudentResponse,
    StudentUpdate,
)
from intered.application.services import StudentImportService, StudentService
from intered.domain.entities import StudentStage
from intered.domain.exceptions import (
    EntityNotFoundError,
    InvalidReferenceError,
    UnsupportedImportFileError,
)
from intered.infrastructure.dependencies import get_student_import_service, get_student_service

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=list[StudentResponse])
async def list_students(
    service: StudentService = Depends(get_student_service),
) -> list[StudentResponse]:
    students = await service.list_students()
    return [StudentResponse.model_validate(s) for s in students]


@router.get("/filter/stage/{stage}", response_model=list[StudentResponse])
async def list_students_by_stage(
    stage: StudentStage,
    service: StudentService = Depends(get_student_service),
) -> list[StudentResponse]:
    students = await service.list_by_stage(stage.value)
    return [StudentResponse.model_validate(s) for s in students]


@router.post("/import", response_model=StudentImportResult)
async def import_students(
    file: UploadFile = File(...),
    service: StudentImportService = Depends(get_student_import_service),
) -> StudentImportResult:
    """Import students from a CSV or XLSX upload.

    Returns the partition of rows read: imported, skipped (duplicate email)
    and failed (invalid row).
    """
    content = await file.read()
    limit = get_settings().max_upload_size_mb * 1024 * 1024
    if len(content) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {get_settings().max_upload_size_mb} MB",
        )

    try:
        summary = await service.import_file(file.filename or "", content)
    except UnsupportedImportFileError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return StudentImportResult.model_validate(summary)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """Retrieve one student; numeric agent/university/program references are resolved to names."""
    try:
        student = await service.get_student_detail(student_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return StudentResponse.model_validate(student)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    data: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    student = await service.create_student(data)
    return StudentResponse.model_validate(student)


async def _update(student_id: int, data: StudentUpdate, service: StudentService) -> StudentResponse:
    try:
        student = await service.update_student(student_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return StudentResponse.model_validate(student)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    return await _update(student_id, data, service)


@router.patch("/{student_id}", response_model=StudentResponse)
async def patch_student(
    student_id: int,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    return await _update(student_id, data, service)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
) -> None:
    try:
        await service.delete_student(student_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
