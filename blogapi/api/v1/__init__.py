"""v1 API 라우터 패키지 — 모든 v1 엔드포인트 통합.

v1 API router package — Aggregates every entity router into
``api_router``, mounted by the application under ``/api/v1``.

Included routers:
    - auth: 회원가입/로그인 (Registration and login)
    - users: 사용자 관리 (User management)
    - categories: 카테고리 관리 (Category management)
    - posts: 게시글 및 게시글-댓글 관계 (Posts and the post/comment relation)
    - comments: 댓글 관리 (Comment management)
"""

from fastapi import APIRouter

from blogapi.api.v1.auth import router as auth_router
from blogapi.api.v1.categories import router as categories_router
from blogapi.api.v1.comments import router as comments_router
from blogapi.api.v1.posts import router as posts_router
from blogapi.api.v1.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
api_router.include_router(comments_router, prefix="/comments", tags=["Comments"])
