from fastapi import APIRouter

from postkeeper.core.modules.user.models import UserView
from postkeeper.web.deps import AppDep, UserIdDep
from postkeeper.web.openapi import ErrorResponse

router = APIRouter(tags=["profile"])


@router.get(
    "/user",
    summary="Get current user profile",
    description="Get the name and email of the currently authenticated user.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
async def get_current_user(app: AppDep, user_id: UserIdDep) -> UserView:
    return await app.get_current_user(user_id)
