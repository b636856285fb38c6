# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.user_dto import UserCreateRequest, UserUpdateRequest, UserResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    CountUsersUseCase,
)
from ...di.container import get_container
from ...domain.exceptions import InvalidArgumentError


router = APIRouter(tags=["users"])


def _user_not_found(user_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found"
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreateRequest) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: User creation request
        
    Returns:
        UserResponse with created user information
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        return await create_user_use_case.execute(name=request.name, email=request.email)
    except InvalidArgumentError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List all users"""
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    return await list_users_use_case.execute()


@router.get("/count", response_model=int)
async def count_users() -> int:
    """Number of stored users"""
    container = get_container()
    count_users_use_case = container.get(CountUsersUseCase)
    
    return await count_users_use_case.execute()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id)
    if user is None:
        raise _user_not_found(user_id)
    return user


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, request: UserUpdateRequest) -> UserResponse:
    """
    Update a user; omitted fields keep their current value
    
    Args:
        user_id: ID of the user
        request: Fields to change
        
    Returns:
        UserResponse with the updated user
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        user = await update_user_use_case.execute(
            user_id=user_id,
            name=request.name,
            email=request.email,
        )
    except InvalidArgumentError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    
    if user is None:
        raise _user_not_found(user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str) -> Response:
    """Delete a user by ID"""
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    deleted = await delete_user_use_case.execute(user_id)
    if not deleted:
        raise _user_not_found(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
