# src/blogdesk/api/v1/endpoints/auth.py
"""Registration and login endpoints."""

from fastapi import APIRouter, status

from blogdesk.schemas.author import AuthorResponse, LoginRequest, LoginResponse, RegisterRequest
from blogdesk.schemas.common import ApiResponse
from blogdesk.services import ServiceError

from ..dependencies import AuthorServiceDep
from ..responses import http_error, success

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthorResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, authors: AuthorServiceDep) -> ApiResponse[AuthorResponse]:
    """Create an account.

    Raises:
        HTTPException: 400 on a rule violation, 409 if the username or email is taken
    """
    try:
        author = authors.register(payload)
    except ServiceError as exc:
        raise http_error(exc) from exc
    return success("Account created successfully", AuthorResponse.model_validate(author))


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(payload: LoginRequest, authors: AuthorServiceDep) -> ApiResponse[LoginResponse]:
    """Exchange a username/email and password for a bearer token.

    Raises:
        HTTPException: 400 if a field is missing, 401 on bad credentials,
                       403 if the account is inactive
    """
    try:
        result = authors.login(payload)
    except ServiceError as exc:
        raise http_error(exc) from exc
    return success("Login successful", result)
