import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from credflow.app.services.mail_notifier import MailDeliveryError
from credflow.app.services.token_generator import TokenGenerator
from credflow.app.use_cases.auth import AuthFlow, AuthRequest, AuthSettings, RedirectOptions
from credflow.domain.entities import ErrorKind, OutcomeKind, User


@pytest.fixture
def mailer():
    mailer = MagicMock()
    mailer.send = AsyncMock()
    return mailer


@pytest.fixture
def flow(hasher, mailer, clock):
    return AuthFlow(
        settings=AuthSettings(),
        hasher=hasher,
        tokens=TokenGenerator(),
        mailer=mailer,
        clock=clock,
    )


@pytest.mark.asyncio
async def test_success_uses_configured_redirect(flow, mock_uow, mock_session, hasher):
    mock_uow.users.get_by_username.return_value = User(
        username="alice1", email="a@example.com", password_hash=hasher.hash("Secret1")
    )
    handler = flow.signin(RedirectOptions(success_redirect="/", failure_redirect="/signin"))

    outcome = await handler(
        AuthRequest(path="/login", username="alice1", password="Secret1"), mock_uow, mock_session
    )

    assert outcome.kind == OutcomeKind.success
    assert outcome.is_success
    assert outcome.redirect_target == "/"
    assert outcome.message == "Signin success"
    assert outcome.cause is None


@pytest.mark.asyncio
async def test_redirects_default_to_request_path(flow, mock_uow, mock_session):
    handler = flow.signin()

    outcome = await handler(
        AuthRequest(path="/login", username="nobody", password="x"), mock_uow, mock_session
    )

    assert outcome.kind == OutcomeKind.failure
    assert outcome.redirect_target == "/login"


@pytest.mark.asyncio
async def test_signin_failures_share_one_message(flow, mock_uow, mock_session, hasher):
    handler = flow.signin(RedirectOptions(failure_redirect="/signin"))

    malformed = await handler(AuthRequest(username="bad name", password="x"), mock_uow, mock_session)
    unknown = await handler(AuthRequest(username="nobody", password="x"), mock_uow, mock_session)
    mock_uow.users.get_by_username.return_value = User(
        username="alice1", email="a@example.com", password_hash=hasher.hash("Secret1")
    )
    wrong = await handler(AuthRequest(username="alice1", password="wrong"), mock_uow, mock_session)

    assert {o.message for o in (malformed, unknown, wrong)} == {"Signin failure"}
    assert {o.redirect_target for o in (malformed, unknown, wrong)} == {"/signin"}
    assert wrong.cause == ErrorKind.MISMATCH


@pytest.mark.asyncio
async def test_signout_always_succeeds(flow, mock_uow, mock_session):
    outcome = await flow.signout(RedirectOptions(success_redirect="/signin"))(
        AuthRequest(path="/signout"), mock_uow, mock_session
    )

    assert outcome.is_success
    assert outcome.redirect_target == "/signin"
    assert outcome.message == "Signout success"


@pytest.mark.asyncio
async def test_dependency_error_is_logged_but_not_exposed(
    flow, mock_uow, mock_session, mailer, caplog
):
    async def set_token(email, token, expires_at):
        return User(username="alice1", email=email, password_hash="h")

    mock_uow.users.set_reset_token_by_email.side_effect = set_token
    mailer.send.side_effect = MailDeliveryError("smtp.example.com refused connection")

    with caplog.at_level(logging.ERROR):
        outcome = await flow.forgot()(
            AuthRequest(path="/forgot", email="a@example.com", ip_address="203.0.113.7"),
            mock_uow,
            mock_session,
        )

    assert outcome.kind == OutcomeKind.failure
    assert outcome.message == "Password request failure"
    assert outcome.cause == ErrorKind.DEPENDENCY_ERROR
    assert "refused" not in outcome.message
    assert "smtp.example.com refused connection" in caplog.text


@pytest.mark.asyncio
async def test_expired_and_unknown_tokens_look_the_same(flow, mock_uow, mock_session, clock):
    from datetime import timedelta

    handler = flow.reset()
    request = AuthRequest(
        path="/reset", reset_token="T" * 24, password="NewPass1", password_confirm="NewPass1"
    )

    unknown = await handler(request, mock_uow, mock_session)
    mock_uow.users.get_by_reset_token.return_value = User(
        username="alice1",
        email="a@example.com",
        password_hash="h",
        reset_token="T" * 24,
        reset_expire=clock.now() - timedelta(hours=1),
    )
    expired = await handler(request, mock_uow, mock_session)

    assert unknown.message == expired.message == "Password reset failure"
    assert unknown.cause == ErrorKind.NOT_FOUND
    assert expired.cause == ErrorKind.EXPIRED
