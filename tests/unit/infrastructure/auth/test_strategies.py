"""Unit tests for authentication strategies and the strategy registry."""

from datetime import timedelta

import pytest
from fastapi import Request

from storefront.core.config import Settings
from storefront.infrastructure.auth.jwt_service import JWTService
from storefront.infrastructure.auth.strategies import (
    Accepted,
    AuthStrategy,
    JWTStrategy,
    Rejected,
    StrategyError,
    StrategyRegistry,
    UnknownStrategyError,
    get_strategy_registry,
)


def make_request(headers: dict[str, str] | None = None) -> Request:
    raw_headers = [
        (key.lower().encode("latin-1"), value.encode("latin-1"))
        for key, value in (headers or {}).items()
    ]
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("test", 80),
            "path": "/api/sessions/current",
            "query_string": b"",
            "headers": raw_headers,
        }
    )


@pytest.fixture
def strategy(settings, jwt_service) -> JWTStrategy:
    return JWTStrategy(jwt_service=jwt_service, settings=settings)


class TestJWTStrategy:

    @pytest.mark.asyncio
    async def test_accepts_bearer_header(self, strategy, user_token, sample_user):
        outcome = await strategy.authenticate(make_request({"Authorization": f"Bearer {user_token}"}))

        assert outcome == Accepted(sample_user)

    @pytest.mark.asyncio
    async def test_accepts_cookie(self, strategy, settings, user_token, sample_user):
        request = make_request({"Cookie": f"{settings.auth_cookie_name}={user_token}"})

        outcome = await strategy.authenticate(request)

        assert outcome == Accepted(sample_user)

    @pytest.mark.asyncio
    async def test_missing_token(self, strategy):
        outcome = await strategy.authenticate(make_request())

        assert outcome == Rejected("No auth token")

    @pytest.mark.asyncio
    async def test_non_bearer_header_is_missing_token(self, strategy, user_token):
        outcome = await strategy.authenticate(make_request({"Authorization": f"Basic {user_token}"}))

        assert outcome == Rejected("No auth token")

    @pytest.mark.asyncio
    async def test_expired_token(self, strategy, jwt_service, sample_user):
        token = jwt_service.generate_token(sample_user, expires_delta=timedelta(seconds=-1))

        outcome = await strategy.authenticate(make_request({"Authorization": f"Bearer {token}"}))

        assert outcome == Rejected("jwt expired")

    @pytest.mark.asyncio
    async def test_malformed_token(self, strategy):
        outcome = await strategy.authenticate(make_request({"Authorization": "Bearer garbage"}))

        assert outcome == Rejected("invalid token")

    @pytest.mark.asyncio
    async def test_foreign_signature(self, strategy, sample_user):
        foreign = JWTService(Settings(secret_key="another-secret-key-of-enough-length"))
        token = foreign.generate_token(sample_user)

        outcome = await strategy.authenticate(make_request({"Authorization": f"Bearer {token}"}))

        assert outcome == Rejected("invalid signature")


class ExplodingStrategy(AuthStrategy):
    async def authenticate(self, request):
        raise ConnectionError("user store unavailable")


class TestStrategyRegistry:

    @pytest.mark.asyncio
    async def test_run_registered_strategy(self, strategy, user_token, sample_user):
        registry = StrategyRegistry()
        registry.register("jwt", strategy)

        outcome = await registry.run("jwt", make_request({"Authorization": f"Bearer {user_token}"}))

        assert outcome == Accepted(sample_user)

    @pytest.mark.asyncio
    async def test_unknown_strategy_is_error_outcome(self):
        outcome = await StrategyRegistry().run("github", make_request())

        assert isinstance(outcome, StrategyError)
        assert isinstance(outcome.cause, UnknownStrategyError)
        assert outcome.cause.name == "github"

    @pytest.mark.asyncio
    async def test_strategy_exception_is_error_outcome(self):
        registry = StrategyRegistry()
        registry.register("boom", ExplodingStrategy())

        outcome = await registry.run("boom", make_request())

        assert isinstance(outcome, StrategyError)
        assert isinstance(outcome.cause, ConnectionError)

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownStrategyError):
            StrategyRegistry().get("missing")

    def test_default_registry_has_jwt(self):
        assert "jwt" in get_strategy_registry().names()
