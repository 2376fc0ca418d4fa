"""Story routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status

from board.application.usecase.story import (
    GetStoryRequest,
    GetStoryResponse,
    GetStoryUseCase,
    VoteStoryRequest,
    VoteStoryUseCase,
)
from board.domain.service import JWTService

router = APIRouter(prefix="/s", tags=["stories"], route_class=DishkaRoute)


@router.get("/{short_url}/", response_model=GetStoryResponse)
async def get_story(
    short_url: str,
    get_story_use_case: FromDishka[GetStoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetStoryResponse:
    """Get a story with its tags and ranked comment tree.

    Authentication is optional. For an authenticated viewer every comment
    on the story is marked as read.

    Args:
        short_url: Story short URL
        get_story_use_case: Get story use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Story projection with tags and comments
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_story_use_case.execute(
        GetStoryRequest(short_url=short_url, viewer_id=viewer_id)
    )


@router.post(
    "/{short_url}/vote",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
)
async def vote_story(
    short_url: str,
    vote_story_use_case: FromDishka[VoteStoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle the user's vote on a story.

    Requires authentication.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    await vote_story_use_case.execute(
        VoteStoryRequest(short_url=short_url, user_id=user_id)
    )
    return Response(status_code=status.HTTP_201_CREATED)
