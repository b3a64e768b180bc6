from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from postkeeper.web.deps import AppDep
from postkeeper.web.openapi import ErrorResponse, MessageResponse

router = APIRouter(tags=["auth"])


class RegisterRequest(BaseModel):
    """Registration request."""

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Email address, used to log in")
    password: str = Field(..., min_length=1, description="Password")
    confirm_password: str = Field(..., alias="confirmPassword", description="Must equal password")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Authentication request."""

    email: str = Field(..., description="Email used at registration")
    password: str = Field(..., description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    message: str = Field(..., description="Human-readable result")
    token: str = Field(..., description="Bearer token for subsequent requests")


@router.post(
    "/register",
    summary="Register user",
    description="Create an account. The email must not be registered yet.",
    operation_id="register",
    responses={
        200: {"description": "User registered"},
        400: {"model": ErrorResponse, "description": "Passwords do not match, invalid or duplicate email"},
    },
)
async def register(request: RegisterRequest, app: AppDep) -> MessageResponse:
    await app.register(request.name, request.email, request.password, request.confirm_password)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    summary="Authenticate user",
    description="Authenticate with email and password to receive a bearer token.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def login(request: LoginRequest, app: AppDep) -> LoginResponse:
    token = await app.login(request.email, request.password)
    return LoginResponse(message="Login successful", token=token)
