"""Profile endpoints for authenticated users.

``/me`` serves any valid bearer token. ``/student`` and ``/landlord`` are the
role-gated profile views of each account category; other roles get 403.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.adapters.api.v1.auth.schemas import UserOut
from src.core.dependencies.auth import CurrentUser, require_roles
from src.domain.entities.user import Role, User

router = APIRouter()


@router.get(
    "/me",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Current account",
)
async def read_current_user(user: CurrentUser) -> UserOut:
    return UserOut.from_entity(user)


@router.get(
    "/student",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Student profile",
)
async def read_student_profile(
    user: Annotated[User, Depends(require_roles(Role.STUDENT))],
) -> UserOut:
    return UserOut.from_entity(user)


@router.get(
    "/landlord",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Landlord profile",
)
async def read_landlord_profile(
    user: Annotated[User, Depends(require_roles(Role.LANDLORD))],
) -> UserOut:
    return UserOut.from_entity(user)
