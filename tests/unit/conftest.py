import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.get_by_reset_token_hash = AsyncMock(return_value=None)
    return uow


@pytest.fixture
def hasher():
    # Lowest bcrypt work factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
