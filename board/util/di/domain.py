"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, CommentSettings
from board.domain.repository import (
    CommentRepository,
    StoryRepository,
    TagRepository,
    UserRepository,
)
from board.domain.service import (
    CommentService,
    JWTService,
    StoryService,
    TagService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, settings=settings)

    @provide
    def get_story_service(self, story_repository: StoryRepository) -> StoryService:
        """Provide story domain service."""
        return StoryService(story_repository=story_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
