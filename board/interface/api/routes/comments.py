"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.service import JWTService
from board.domain.value import CommentSortOrder
from board.interface.api.session import parse_id, require_user_id

router = APIRouter(prefix="/subjects", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_comment_id: str | None = None  # Parent comment ID for replies


@router.get("/{subject_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    subject_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    order: CommentSortOrder = CommentSortOrder.NEWEST,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get the comment thread of a subject.

    Top-level comments are ordered newest or oldest first; replies are always
    oldest first.

    Raises:
        HTTPException: 404 if the subject does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                subject_id=parse_id(subject_id, "Subject"),
                order=order,
                user_id=user_id,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found"
        )


@router.post(
    "/{subject_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    subject_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a subject or reply to another comment.

    Requires authentication.

    Raises:
        HTTPException: 400 if content or parent is invalid, 404 if the subject
            does not exist
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")
    subject_id = parse_id(subject_id, "Subject")

    parent_comment_id = request.parent_comment_id
    if parent_comment_id:
        try:
            UUID(parent_comment_id)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Parent comment not found",
            )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                subject_id=subject_id,
                content=request.content,
                author_id=user_id,
                parent_comment_id=parent_comment_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
