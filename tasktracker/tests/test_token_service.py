from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from itsdangerous import URLSafeSerializer

from tasktracker.application.services.token_service import DEFAULT_TOKEN_TTL, SignedTokenService
from tasktracker.domain.users.exceptions import ExpiredTokenError, InvalidTokenError

SECRET = "a-very-long-signing-secret-for-tests-only"
ISSUED = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


class MutableClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> MutableClock:
    return MutableClock(ISSUED)


@pytest.fixture()
def service(clock: MutableClock) -> SignedTokenService:
    return SignedTokenService(SECRET, clock=clock)


def test_default_lifetime_is_seven_days() -> None:
    assert DEFAULT_TOKEN_TTL == timedelta(days=7)


def test_issued_token_validates_to_owner(service: SignedTokenService) -> None:
    token = service.issue("user-1")

    assert service.validate(token) == "user-1"


def test_claims_carry_issue_and_expiry(service: SignedTokenService) -> None:
    claims = service.decode(service.issue("user-1"))

    assert claims.issued_at == ISSUED
    assert claims.expires_at == ISSUED + timedelta(days=7)


def test_token_valid_just_before_expiry(service: SignedTokenService, clock: MutableClock) -> None:
    token = service.issue("user-1")
    clock.now = ISSUED + timedelta(days=7) - timedelta(seconds=1)

    assert service.validate(token) == "user-1"


def test_token_expires_after_seven_days(service: SignedTokenService, clock: MutableClock) -> None:
    token = service.issue("user-1")
    clock.now = ISSUED + timedelta(days=7)

    with pytest.raises(ExpiredTokenError):
        service.validate(token)


def test_tampered_token_is_invalid(service: SignedTokenService) -> None:
    _, signature = service.issue("user-1").rsplit(".", 1)
    payload, _ = service.issue("user-2").rsplit(".", 1)
    tampered = f"{payload}.{signature}"

    with pytest.raises(InvalidTokenError):
        service.validate(tampered)


def test_token_from_other_secret_is_invalid(clock: MutableClock) -> None:
    token = SignedTokenService("another-secret-of-decent-length-xyz", clock=clock).issue("user-1")

    with pytest.raises(InvalidTokenError):
        SignedTokenService(SECRET, clock=clock).validate(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_garbage_is_invalid(service: SignedTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        service.validate(token)


def test_signed_payload_without_subject_is_invalid(service: SignedTokenService) -> None:
    forged = URLSafeSerializer(SECRET, salt="tasktracker.session-token").dumps({"iat": 1, "exp": 2})

    with pytest.raises(InvalidTokenError):
        service.validate(forged)


def test_expired_and_invalid_are_both_unauthenticated(
    service: SignedTokenService, clock: MutableClock
) -> None:
    token = service.issue("user-1")
    clock.now = ISSUED + timedelta(days=30)

    with pytest.raises(ExpiredTokenError) as expired:
        service.validate(token)
    with pytest.raises(InvalidTokenError) as invalid:
        service.validate("garbage")

    assert expired.value.status == invalid.value.status == 401


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        SignedTokenService("")
