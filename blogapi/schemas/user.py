"""사용자 및 인증 관련 Pydantic 요청/응답 스키마 정의.

User and auth Pydantic request/response schema definitions.
Request fields carry no length constraints on purpose: emptiness is checked
by the service so it can answer with a bad-request envelope before any
storage access.
"""

from pydantic import BaseModel

from blogapi.schemas.common import ApiResponse, ApiResponsePaginated


# === 사용자 (User) 스키마 ===

class CreateUserRequest(BaseModel):
    """사용자 생성 요청 스키마.

    User creation request schema.

    Attributes:
        firstname: 이름 (First name)
        lastname: 성 (Last name)
        email: 이메일, 고유 (Email, unique)
        password: 평문 비밀번호, 저장 전 해시 (Plain password, hashed before storage)
    """

    firstname: str = ""
    lastname: str = ""
    email: str = ""
    password: str = ""


class UpdateUserRequest(BaseModel):
    """사용자 수정 요청 스키마 (전체 교체).

    User update request schema. Every field replaces the stored value.
    """

    firstname: str = ""
    lastname: str = ""
    email: str = ""
    password: str = ""


class UserResponse(BaseModel):
    """사용자 응답 스키마 — 비밀번호는 절대 포함하지 않음.

    User response schema. The password hash is never included.
    """

    id: int  # 사용자 ID (User id)
    firstname: str  # 이름 (First name)
    lastname: str  # 성 (Last name)
    email: str  # 이메일 (Email)


ApiResponseUser = ApiResponse[UserResponse]
ApiResponseUsersPaginated = ApiResponsePaginated[UserResponse]


# === 인증 (Auth) 스키마 ===

class RegisterRequest(CreateUserRequest):
    """회원가입 요청 스키마 — 사용자 생성과 동일한 필드.

    Registration request; same fields and rules as user creation.
    """


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Login request schema.
    """

    email: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    """JWT 토큰 응답 스키마.

    Access token issued on successful login.
    """

    access_token: str  # JWT 액세스 토큰 (JWT access token)
    token_type: str = "bearer"  # 토큰 유형 (Token type)


ApiResponseToken = ApiResponse[TokenResponse]
