"""
Unit tests for ResetPasswordUseCase and VerifyResetTokenUseCase
"""
from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from src.app.services.reset_token_manager import ResetTokenManager
from src.app.use_cases.auth import ResetPasswordUseCase, VerifyResetTokenUseCase
from src.domain.entities import User
from tests.fixtures.in_memory import FrozenClock, InMemoryUnitOfWork


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 5, 1, 12, 0, 0))


@pytest_asyncio.fixture
async def uow(hasher):
    uow = InMemoryUnitOfWork()
    await uow.users.create(
        User(
            name="Alice",
            email="alice@example.com",
            password_hash=hasher.hash("OldPass123!"),
        )
    )
    return uow


@pytest_asyncio.fixture
async def token(uow, clock):
    user = await uow.users.get_by_email("alice@example.com")
    return await ResetTokenManager(uow.users, clock=clock).issue(user)


@pytest.mark.asyncio
async def test_successful_reset(uow, hasher, clock, token):
    # Arrange
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    # Act
    result = await use_case.execute(token, "NewPass456!")

    # Assert
    assert result.is_ok()
    assert result.value.status == "success"
    assert result.value.message == "Password has been reset successfully"

    user = await uow.users.get_by_email("alice@example.com")
    assert hasher.verify("NewPass456!", user.password_hash)
    assert not hasher.verify("OldPass123!", user.password_hash)
    assert user.pending_reset is None
    assert user.reset_token_hash is None
    assert user.reset_token_expires_at is None
    assert uow.commits == 1


@pytest.mark.asyncio
async def test_reset_is_single_use(uow, hasher, clock, token):
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    first = await use_case.execute(token, "NewPass456!")
    second = await use_case.execute(token, "OtherPass789!")

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "INVALID_TOKEN"

    user = await uow.users.get_by_email("alice@example.com")
    assert hasher.verify("NewPass456!", user.password_hash)


@pytest.mark.asyncio
async def test_reset_expired_token(uow, hasher, clock, token):
    clock.advance(timedelta(hours=1))
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    result = await use_case.execute(token, "NewPass456!")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    user = await uow.users.get_by_email("alice@example.com")
    assert hasher.verify("OldPass123!", user.password_hash)
    assert uow.commits == 0


@pytest.mark.asyncio
async def test_reset_unknown_token(uow, hasher, clock, token):
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    result = await use_case.execute("not-a-real-token", "NewPass456!")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_reset_short_password_leaves_state_untouched(uow, hasher, clock, token):
    """Password is validated before the token is looked up or consumed"""
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    result = await use_case.execute(token, "12345")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"

    user = await uow.users.get_by_email("alice@example.com")
    assert user.pending_reset is not None
    assert hasher.verify("OldPass123!", user.password_hash)
    assert uow.users.update_calls == 1  # only the issue() call
    assert uow.commits == 0

    # The token still works afterwards
    retry = await use_case.execute(token, "123456")
    assert retry.is_ok()


@pytest.mark.asyncio
async def test_reset_missing_token(uow, hasher, clock):
    use_case = ResetPasswordUseCase(uow, hasher, clock=clock)

    result = await use_case.execute("", "NewPass456!")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_verify_live_token(uow, clock, token):
    use_case = VerifyResetTokenUseCase(uow, clock=clock)

    result = await use_case.execute(token)

    assert result.is_ok()
    assert result.value.status == "success"
    assert result.value.valid is True

    # Verification does not consume the token
    again = await use_case.execute(token)
    assert again.is_ok()
    user = await uow.users.get_by_email("alice@example.com")
    assert user.pending_reset is not None


@pytest.mark.asyncio
async def test_verify_expired_token(uow, clock, token):
    use_case = VerifyResetTokenUseCase(uow, clock=clock)

    clock.advance(timedelta(minutes=59, seconds=59))
    assert (await use_case.execute(token)).is_ok()

    clock.advance(timedelta(seconds=1))
    result = await use_case.execute(token)
    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_verify_after_consume(uow, hasher, clock, token):
    await ResetPasswordUseCase(uow, hasher, clock=clock).execute(token, "NewPass456!")

    result = await VerifyResetTokenUseCase(uow, clock=clock).execute(token)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
