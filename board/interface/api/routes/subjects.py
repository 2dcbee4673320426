"""Subject routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from board.application.usecase.subject import (
    CreateSubjectRequest,
    CreateSubjectResponse,
    CreateSubjectUseCase,
    GetSubjectRequest,
    GetSubjectResponse,
    GetSubjectUseCase,
    ListSubjectsRequest,
    ListSubjectsResponse,
    ListSubjectsUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.service import JWTService
from board.interface.api.session import parse_id, require_user_id

router = APIRouter(prefix="/subjects", tags=["subjects"], route_class=DishkaRoute)


class CreateSubjectAPIRequest(BaseModel):
    """API request for creating a subject."""

    title: str
    description: str | None = None


@router.get("", response_model=ListSubjectsResponse)
async def list_subjects(
    list_subjects_use_case: FromDishka[ListSubjectsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListSubjectsResponse:
    """List all subjects, newest first, with the caller's vote state."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_subjects_use_case.execute(ListSubjectsRequest(user_id=user_id))


@router.post(
    "", response_model=CreateSubjectResponse, status_code=status.HTTP_201_CREATED
)
async def create_subject(
    request: CreateSubjectAPIRequest,
    create_subject_use_case: FromDishka[CreateSubjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateSubjectResponse:
    """Create a subject.

    Requires authentication.

    Raises:
        HTTPException: 400 if title or description is invalid
    """
    user_id = require_user_id(jwt_service, auth_token, "create subjects")

    try:
        return await create_subject_use_case.execute(
            CreateSubjectRequest(
                title=request.title,
                description=request.description,
                author_id=user_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        # Valid token for a user that no longer exists
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@router.get("/{subject_id}", response_model=GetSubjectResponse)
async def get_subject(
    subject_id: str,
    get_subject_use_case: FromDishka[GetSubjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetSubjectResponse:
    """Get a single subject with the caller's vote state.

    Raises:
        HTTPException: 404 if the subject does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_subject_use_case.execute(
            GetSubjectRequest(
                subject_id=parse_id(subject_id, "Subject"), user_id=user_id
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found"
        )
