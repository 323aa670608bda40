"""댓글 Pydantic 요청/응답 스키마 정의.

Comment Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from blogapi.schemas.common import ApiResponse, ApiResponsePaginated


class CreateCommentRequest(BaseModel):
    """댓글 생성 요청 스키마.

    Attributes:
        id_post_comment: 대상 게시글 ID (Target post id, must exist)
        user_name_comment: 작성자 이름 (Author name)
        comment: 댓글 본문 (Comment body)
    """

    id_post_comment: int = 0
    user_name_comment: str = ""
    comment: str = ""


class UpdateCommentRequest(CreateCommentRequest):
    """댓글 수정 요청 스키마 (전체 교체)."""


class CommentResponse(BaseModel):
    """댓글 응답 스키마."""

    id: int
    id_post_comment: int
    user_name_comment: str
    comment: str


ApiResponseComment = ApiResponse[CommentResponse]
ApiResponseCommentsPaginated = ApiResponsePaginated[CommentResponse]
