# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Five endpoints mounted under /api/users.
# The collection routes answer both /api/users and /api/users/.
# Authentication is enforced by the middleware pipeline, not here.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from app.dependencies import UserServiceDep
from core.models.user import User, UserCreate, UserUpdate

router = APIRouter()

UserId = Annotated[int, Path(description="User ID")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[User],
    operation_id="GetAllUsers",
    responses={status.HTTP_200_OK: {"description": "All users"}},
)
@router.get("/", response_model=list[User], include_in_schema=False)
async def get_all_users(service: UserServiceDep):
    """
    List all users.

    Returns every user in the store, in creation order.
    """
    return service.list_users()


@router.get(
    "/{id}",
    response_model=User,
    operation_id="GetUserById",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user_by_id(id: UserId, service: UserServiceDep):
    """Get a single user by ID."""
    return service.get_user(id)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    operation_id="CreateUser",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Email missing or empty"},
        status.HTTP_409_CONFLICT: {"description": "Email already registered"},
    },
)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_user(payload: UserCreate, response: Response, service: UserServiceDep):
    """
    Create a new user.

    The ID is assigned by the server. Returns the created user with a
    Location header pointing at it.
    """
    user = service.create_user(payload)
    response.headers["Location"] = f"/api/users/{user.id}"
    return user


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="UpdateUser",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def update_user(id: UserId, payload: UserUpdate, service: UserServiceDep):
    """
    Update a user.

    Partial update: fields left out (or sent as null) keep their
    current value.
    """
    service.update_user(id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="DeleteUser",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def delete_user(id: UserId, service: UserServiceDep):
    """Delete a user."""
    service.delete_user(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
