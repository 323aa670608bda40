"""게시글 및 게시글-댓글 관계 Pydantic 스키마 정의.

Post and post-relation Pydantic schema definitions.
``user_id`` is not part of the write requests: it comes from the
authenticated principal.
"""

from pydantic import BaseModel

from blogapi.schemas.common import ApiResponse, ApiResponsePaginated


class CreatePostRequest(BaseModel):
    """게시글 생성 요청 스키마.

    Post creation request schema.

    Attributes:
        title: 제목 (Title, required)
        body: 본문 (Body, required)
        file: 이미지 참조, 빈 값 허용 (Image reference, may be empty)
        category_id: 카테고리 ID (Existing category id)
        user_name: 작성자 이름 스냅샷 (Author name snapshot, required)
    """

    title: str = ""
    body: str = ""
    file: str = ""  # 이미지 참조 문자열 (Opaque image reference)
    category_id: int = 0
    user_name: str = ""


class UpdatePostRequest(CreatePostRequest):
    """게시글 수정 요청 스키마 (전체 교체).

    Post update request; every field replaces the stored value and the
    author snapshot is retaken from ``user_name``.
    """


class PostResponse(BaseModel):
    """게시글 응답 스키마."""

    id: int
    title: str
    body: str
    img: str  # 이미지 참조 (Image reference)
    category_id: int
    user_id: int
    user_name: str  # 작성 시점 작성자 이름 (Author name at write time)


class PostRelationResponse(BaseModel):
    """게시글-댓글 관계 행 스키마 — 댓글 1개당 1행.

    One flat row of the post/comment relation. A post without comments
    yields a single row whose comment fields are null.

    Attributes:
        post_id: 게시글 ID (Post id)
        title: 게시글 제목 (Post title)
        comment_id: 댓글 ID (Comment id, null when the post has none)
        id_post_comment: 댓글의 게시글 ID (Comment's post id, null when none)
        user_name_comment: 댓글 작성자 (Comment author, null when none)
        comment: 댓글 본문 (Comment body, null when none)
    """

    post_id: int
    title: str
    comment_id: int | None = None
    id_post_comment: int | None = None
    user_name_comment: str | None = None
    comment: str | None = None


ApiResponsePost = ApiResponse[PostResponse]
ApiResponsePostsPaginated = ApiResponsePaginated[PostResponse]
ApiResponsePostRelation = ApiResponse[list[PostRelationResponse]]
