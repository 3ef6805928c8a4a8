"""Student card endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import CardCreate, CardResponse
from intered.application.services import CardService
from intered.domain.exceptions import DuplicateEntityError, InvalidReferenceError
from intered.infrastructure.dependencies import get_card_service

router = APIRouter(prefix="/cards", tags=["Cards"])


@router.get("", response_model=list[CardResponse])
async def list_cards(service: CardService = Depends(get_card_service)) -> list[CardResponse]:
    return [CardResponse.model_validate(c) for c in await service.list_cards()]


@router.get("/student/{student_id}", response_model=list[CardResponse])
async def list_cards_for_student(
    student_id: int,
    service: CardService = Depends(get_card_service),
) -> list[CardResponse]:
    return [CardResponse.model_validate(c) for c in await service.list_for_student(student_id)]


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def issue_card(data: CardCreate, service: CardService = Depends(get_card_service)) -> CardResponse:
    try:
        card = await service.issue_card(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Card number already issued")
    return CardResponse.model_validate(card)
