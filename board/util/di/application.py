"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    VoteCommentUseCase,
)
from board.application.usecase.story import GetStoryUseCase, VoteStoryUseCase
from board.domain.service import (
    CommentService,
    StoryService,
    TagService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Story use cases
    @provide(scope=Scope.REQUEST)
    def get_get_story_use_case(
        self,
        story_service: StoryService,
        comment_service: CommentService,
        tag_service: TagService,
    ) -> GetStoryUseCase:
        """Provide get story use case."""
        return GetStoryUseCase(
            story_service=story_service,
            comment_service=comment_service,
            tag_service=tag_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_story_use_case(self, story_service: StoryService) -> VoteStoryUseCase:
        """Provide vote story use case."""
        return VoteStoryUseCase(story_service=story_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        story_service: StoryService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            story_service=story_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self, comment_service: CommentService
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
