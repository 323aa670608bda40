"""게시글-댓글 관계 집계 모듈.

Relation aggregator.
Loads one post together with all of its comments and flattens the pair
into the wire rows of ``PostRelationResponse``: one row per comment, or a
single row with null comment fields when the post has none.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.models.comment import Comment
from blogapi.models.post import Post
from blogapi.repositories.comment_repository import CommentRepository, comment_repository
from blogapi.repositories.post_repository import PostRepository, post_repository
from blogapi.schemas.post import PostRelationResponse

logger = logging.getLogger(__name__)


@dataclass
class PostWithComments:
    """게시글과 그 댓글 목록 — A post and its comments, ordered by comment id."""

    post: Post
    comments: list[Comment] = field(default_factory=list)

    def flatten(self) -> list[PostRelationResponse]:
        """관계를 평탄한 행 목록으로 변환합니다.

        Flatten into wire rows. Every row repeats ``post_id`` and ``title``.
        """
        if not self.comments:
            return [PostRelationResponse(post_id=self.post.id, title=self.post.title)]

        return [
            PostRelationResponse(
                post_id=self.post.id,
                title=self.post.title,
                comment_id=comment.id,
                id_post_comment=comment.id_post_comment,
                user_name_comment=comment.user_name_comment,
                comment=comment.comment,
            )
            for comment in self.comments
        ]


class RelationAggregator:
    """게시글과 댓글을 조합하는 집계기.

    Stateless; the session is passed on every call.
    """

    def __init__(
        self,
        posts: PostRepository = post_repository,
        comments: CommentRepository = comment_repository,
    ) -> None:
        self.posts: PostRepository = posts
        self.comments: CommentRepository = comments

    async def load(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> PostWithComments | None:
        """게시글과 모든 댓글을 조회합니다.

        Load the post and every one of its comments. The comment fetch is
        not paginated.

        Returns:
            PostWithComments | None: 게시글이 없으면 None (None when the post is missing)
        """
        post: Post | None = await self.posts.get_by_id(db, post_id)
        if post is None:
            return None

        comments: list[Comment] = await self.comments.get_by_post(db, post_id)
        logger.debug("Post id=%s has %d comment(s)", post_id, len(comments))
        return PostWithComments(post=post, comments=comments)

    async def find_post_with_comments(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> list[PostRelationResponse] | None:
        """게시글-댓글 관계 행을 반환합니다.

        Return the flattened relation rows for *post_id*, or None when the
        post does not exist.
        """
        relation: PostWithComments | None = await self.load(db, post_id)
        if relation is None:
            return None
        return relation.flatten()


# 싱글턴 인스턴스 — Singleton instance
relation_aggregator: RelationAggregator = RelationAggregator()
