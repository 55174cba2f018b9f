"""
User Handler

Handles user profile endpoints.

ARCHITECTURE:
=============
    Handler → UserManager → UserRepository → MongoDB

Every route of this router requires the Bearer policy (applied when the
router is registered). Responses are UserResponse: the password hash never
leaves the service.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from watchall.api.dependencies.container import get_user_manager
from watchall.shared.core.exceptions import NotFoundError, UserNotFoundError, ValidationError
from watchall.shared.managers.user_manager import UserManager
from watchall.shared.models.user import UserProfile
from watchall.shared.schemas.user import PasswordValidationRequest, UserResponse


router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    user_manager: UserManager = Depends(get_user_manager),
):
    """List every user profile."""
    return await user_manager.get_all_users()


@router.get("/by-login/{login}", response_model=UserResponse)
async def get_user_by_login(
    login: str,
    user_manager: UserManager = Depends(get_user_manager),
):
    """
    Get a user profile by login.

    Raises:
        404: If no profile has that login
    """
    user = await user_manager.get_by_login(login)
    if user is None:
        raise NotFoundError("User", details={"login": login})
    return user


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    user_manager: UserManager = Depends(get_user_manager),
):
    """
    Get a user profile by email.

    Raises:
        404: If no profile has that email
    """
    user = await user_manager.get_by_email(email)
    if user is None:
        raise NotFoundError("User", details={"email": email})
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_manager: UserManager = Depends(get_user_manager),
):
    """Get a user profile by id."""
    user = await user_manager.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    profile: UserProfile,
    user_manager: UserManager = Depends(get_user_manager),
):
    """
    Create a user profile.

    Login and email uniqueness is not enforced.
    """
    return await user_manager.insert_profile(profile)


@router.post("/validate-password", status_code=status.HTTP_200_OK)
async def validate_password(
    request: PasswordValidationRequest,
    user_manager: UserManager = Depends(get_user_manager),
):
    """
    Password validation hook.

    Not implemented yet: always answers 501.
    """
    return {"result": user_manager.validate_password(request.password)}


@router.put("/{user_id}", response_model=UserResponse)
async def replace_user(
    user_id: str,
    profile: UserProfile,
    user_manager: UserManager = Depends(get_user_manager),
):
    """
    Replace a user profile.

    Raises:
        400: If the body carries a different id
        404: If the profile does not exist
    """
    if profile.id is not None and profile.id != user_id:
        raise ValidationError(
            "Document id cannot be changed",
            details={"id": user_id, "document_id": profile.id},
        )
    return await user_manager.update_profile(profile.model_copy(update={"id": user_id}))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    user_id: str,
    user_manager: UserManager = Depends(get_user_manager),
):
    """Delete a user profile."""
    if not await user_manager.delete_profile(user_id):
        raise UserNotFoundError(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
