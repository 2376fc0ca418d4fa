"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from board.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    VoteCommentRequest,
    VoteCommentUseCase,
)
from board.domain.service import JWTService
from board.domain.value import UserId

router = APIRouter(prefix="/c", tags=["comments"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> UserId:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Length and emptiness are checked by the domain so that every violation
    is reported together.
    """

    story: str  # Story short URL
    parent: str | None = None  # Parent comment short URL for replies
    comment: str


@router.post("/", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a story or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment
    """
    user_id = _require_user(jwt_service, auth_token, "comment")

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            story=request.story,
            parent=request.parent,
            comment=request.comment,
            author_id=user_id,
        )
    )


@router.get("/{short_url}/", response_model=CommentItem)
async def get_comment(
    short_url: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment (replies are not included)."""
    return await get_comment_use_case.execute(GetCommentRequest(short_url=short_url))


@router.post(
    "/{short_url}/vote",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
)
async def vote_comment(
    short_url: str,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle the user's vote on a comment.

    Requires authentication.
    """
    user_id = _require_user(jwt_service, auth_token, "vote")

    await vote_comment_use_case.execute(
        VoteCommentRequest(short_url=short_url, user_id=user_id)
    )
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{short_url}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_comment(
    short_url: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a comment along with its replies.

    Only the author can delete a comment.
    """
    user_id = _require_user(jwt_service, auth_token, "delete comments")

    await delete_comment_use_case.execute(
        DeleteCommentRequest(short_url=short_url, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
