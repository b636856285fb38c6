from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    CountUsersUseCase,
    ClearUsersUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


USER_USE_CASES = (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    CountUsersUseCase,
    ClearUsersUseCase,
)


class UserProvider:
    """User use case provider - registers all user resource use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories and share the UserRepository singleton.
        """
        for use_case_class in USER_USE_CASES:
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    user_repository=container.get(UserRepository)
                )
            )
