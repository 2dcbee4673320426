"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from board.application.usecase.vote import VoteRequest, VoteResponse, VoteUseCase
from board.domain.error import InvalidActionError, NotFoundError
from board.domain.service import JWTService
from board.domain.value import VotableType
from board.interface.api.session import parse_id, require_user_id

router = APIRouter(prefix="/subjects", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for a vote: like, dislike or remove."""

    action: str


async def _vote(vote_use_case: VoteUseCase, request: VoteRequest) -> VoteResponse:
    try:
        return await vote_use_case.execute(request)
    except InvalidActionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{e.resource} not found",
        )


@router.post("/{subject_id}/like", response_model=VoteResponse)
async def vote_subject(
    subject_id: str,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Like, dislike or clear the caller's vote on a subject.

    Requires authentication.

    Raises:
        HTTPException: 400 on an invalid action, 404 if the subject does not exist
    """
    user_id = require_user_id(jwt_service, auth_token, "vote")
    return await _vote(
        vote_use_case,
        VoteRequest(
            votable_type=VotableType.SUBJECT,
            subject_id=parse_id(subject_id, "Subject"),
            user_id=user_id,
            action=request.action,
        ),
    )


@router.post("/{subject_id}/comments/{comment_id}/like", response_model=VoteResponse)
async def vote_comment(
    subject_id: str,
    comment_id: str,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Like, dislike or clear the caller's vote on a comment of a subject.

    Requires authentication.

    Raises:
        HTTPException: 400 on an invalid action, 404 if the comment does not
            exist on this subject
    """
    user_id = require_user_id(jwt_service, auth_token, "vote")
    return await _vote(
        vote_use_case,
        VoteRequest(
            votable_type=VotableType.COMMENT,
            subject_id=parse_id(subject_id, "Comment"),
            comment_id=parse_id(comment_id, "Comment"),
            user_id=user_id,
            action=request.action,
        ),
    )
