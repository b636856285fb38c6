from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .count_users import CountUsersUseCase
from .clear_users import ClearUsersUseCase
from .mapping import to_user_response

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "CountUsersUseCase",
    "ClearUsersUseCase",
    "to_user_response",
]
