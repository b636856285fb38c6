"""
Unit tests for user use cases against a mocked UserRepository.
"""
import pytest

from user_backend.application.dto.user_dto import UserResponse
from user_backend.application.use_cases.user import (
    ClearUsersUseCase,
    CountUsersUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from user_backend.domain.exceptions import InvalidArgumentError
from user_backend.domain.models.user import User


def _make_user(user_id: str = "1", name: str = "John", email: str = "john@example.com") -> User:
    return User(id=user_id, name=name, email=email)


async def _echo(user: User) -> User:
    return user


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        mock_user_repo.save.return_value = _make_user("usr-new", "New User", "new@example.com")

        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute("New User", "new@example.com")

        assert isinstance(result, UserResponse)
        assert result.id == "usr-new"
        assert result.name == "New User"
        assert result.email == "new@example.com"
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", None])
    async def test_create_blank_name_raises_without_saving(self, mock_user_repo, name):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(InvalidArgumentError, match="^Name cannot be empty$"):
            await use_case.execute(name, "a@b.com")
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["no-at-sign", "", None])
    async def test_create_invalid_email_raises_without_saving(self, mock_user_repo, email):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(InvalidArgumentError, match="^Invalid email$"):
            await use_case.execute("A", email)
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_email_is_not_logged(self, mock_user_repo, caplog):
        caplog.set_level("DEBUG", logger="user_backend")
        with pytest.raises(InvalidArgumentError):
            await CreateUserUseCase(mock_user_repo).execute("A", "secret-address")
        assert "invalid email" in caplog.text
        assert "secret-address" not in caplog.text


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("1", "X", "x@x.com")
        result = await GetUserUseCase(mock_user_repo).execute("1")
        assert result == UserResponse(id="1", name="X", email="x@x.com")

    @pytest.mark.asyncio
    async def test_get_not_found_returns_none(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        result = await GetUserUseCase(mock_user_repo).execute("999")
        assert result is None


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_user_repo):
        mock_user_repo.find_all.return_value = []
        assert await ListUsersUseCase(mock_user_repo).execute() == []

    @pytest.mark.asyncio
    async def test_list_keeps_store_order(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [
            _make_user("2", "Bob", "bob@example.com"),
            _make_user("1", "Alice", "alice@example.com"),
        ]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.id for user in result] == ["2", "1"]


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_update_name_only(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = _echo

        result = await UpdateUserUseCase(mock_user_repo).execute("1", "Johnny", None)

        assert result.name == "Johnny"
        assert result.email == "john@example.com"

    @pytest.mark.asyncio
    async def test_update_email_only(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = _echo

        result = await UpdateUserUseCase(mock_user_repo).execute("1", None, "johnny@example.com")

        assert result.name == "John"
        assert result.email == "johnny@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank_name", ["", "   ", "\t"])
    async def test_blank_name_is_skipped_not_rejected(self, mock_user_repo, blank_name):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = _echo

        result = await UpdateUserUseCase(mock_user_repo).execute("1", blank_name, "new@x.com")

        assert result.name == "John"
        assert result.email == "new@x.com"
        mock_user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_with_no_fields_returns_user_unchanged(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = _echo

        result = await UpdateUserUseCase(mock_user_repo).execute("1")

        assert result == UserResponse(id="1", name="John", email="john@example.com")
        mock_user_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_email_rejects_whole_update(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()

        with pytest.raises(InvalidArgumentError, match="^Invalid email$"):
            await UpdateUserUseCase(mock_user_repo).execute("1", "Johnny", "bad-email")
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_update_email_is_not_logged(self, mock_user_repo, caplog):
        caplog.set_level("DEBUG", logger="user_backend")
        mock_user_repo.find_by_id.return_value = _make_user()
        with pytest.raises(InvalidArgumentError):
            await UpdateUserUseCase(mock_user_repo).execute("1", None, "secret-address")
        assert "invalid email" in caplog.text
        assert "secret-address" not in caplog.text

    @pytest.mark.asyncio
    async def test_empty_email_is_rejected(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user()

        with pytest.raises(InvalidArgumentError, match="Invalid email"):
            await UpdateUserUseCase(mock_user_repo).execute("1", None, "")

    @pytest.mark.asyncio
    async def test_missing_user_returns_none_before_validation(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None

        result = await UpdateUserUseCase(mock_user_repo).execute("999", "Name", "bad-email")

        assert result is None
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_does_not_mutate_loaded_entity(self, mock_user_repo):
        loaded = _make_user()
        mock_user_repo.find_by_id.return_value = loaded
        mock_user_repo.save.side_effect = _echo

        await UpdateUserUseCase(mock_user_repo).execute("1", "Johnny", "johnny@example.com")

        assert loaded.name == "John"
        assert loaded.email == "john@example.com"


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_user_repo):
        mock_user_repo.exists_by_id.return_value = True
        assert await DeleteUserUseCase(mock_user_repo).execute("1") is True
        mock_user_repo.delete_by_id.assert_awaited_once_with("1")

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_user_repo):
        mock_user_repo.exists_by_id.return_value = False
        assert await DeleteUserUseCase(mock_user_repo).execute("999") is False
        mock_user_repo.delete_by_id.assert_not_called()


class TestCountAndClearUseCases:
    """Tests for CountUsersUseCase and ClearUsersUseCase"""

    @pytest.mark.asyncio
    async def test_count(self, mock_user_repo):
        mock_user_repo.count.return_value = 3
        assert await CountUsersUseCase(mock_user_repo).execute() == 3

    @pytest.mark.asyncio
    async def test_clear(self, mock_user_repo):
        await ClearUsersUseCase(mock_user_repo).execute()
        mock_user_repo.delete_all.assert_awaited_once()


class TestStoreErrorsPropagate:
    """Store failures are not translated by the use cases"""

    @pytest.mark.asyncio
    async def test_save_error_propagates(self, mock_user_repo):
        mock_user_repo.save.side_effect = RuntimeError("Error saving user: boom")
        with pytest.raises(RuntimeError, match="boom"):
            await CreateUserUseCase(mock_user_repo).execute("A", "a@b.com")
