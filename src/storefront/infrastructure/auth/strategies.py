"""Named authentication strategies and the registry that runs them.

A strategy inspects an incoming request and reports one of three outcomes:

- ``StrategyError``: the check itself failed (infrastructure fault).
- ``Rejected``: the credentials were refused, with a reason string.
- ``Accepted``: the request is authenticated as ``identity``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Union

from fastapi import Request

from storefront.core.config import Settings, get_settings
from storefront.core.logging import get_logger
from storefront.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class StrategyError:
    """The strategy could not run to completion."""

    cause: BaseException


@dataclass(frozen=True)
class Rejected:
    """Credentials were refused."""

    reason: str


@dataclass(frozen=True)
class Accepted:
    """Credentials were accepted and resolved to ``identity``."""

    identity: Any


StrategyOutcome = Union[StrategyError, Rejected, Accepted]


class UnknownStrategyError(LookupError):
    """Raised when no strategy is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown authentication strategy "{name}"')
        self.name = name


class AuthStrategy(ABC):
    """Contract for authentication strategies."""

    @abstractmethod
    async def authenticate(self, request: Request) -> StrategyOutcome:
        """Inspect the request and report the authentication outcome."""


class JWTStrategy(AuthStrategy):
    """Authenticates requests carrying a bearer token.

    The token is read from the auth cookie first, then from the
    ``Authorization: Bearer <token>`` header.
    """

    def __init__(
        self,
        jwt_service: JWTService | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._jwt_service = jwt_service or JWTService(self._settings)

    def extract_token(self, request: Request) -> str | None:
        token = request.cookies.get(self._settings.auth_cookie_name)
        if token:
            return token

        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.lower().startswith("bearer "):
            return auth_header[7:].strip() or None
        return None

    async def authenticate(self, request: Request) -> StrategyOutcome:
        token = self.extract_token(request)
        if token is None:
            return Rejected("No auth token")

        try:
            payload = self._jwt_service.decode_token(token)
        except TokenExpiredError:
            return Rejected("jwt expired")
        except InvalidTokenError as e:
            return Rejected(e.reason)

        user = payload.get("user")
        if user is None:
            return Rejected("invalid token")
        return Accepted(user)


class StrategyRegistry:
    """Holds strategies by name and runs them on demand."""

    def __init__(self) -> None:
        self._strategies: dict[str, AuthStrategy] = {}

    def register(self, name: str, strategy: AuthStrategy) -> None:
        if name in self._strategies:
            logger.warning("Replacing authentication strategy", strategy=name)
        self._strategies[name] = strategy

    def get(self, name: str) -> AuthStrategy:
        try:
            return self._strategies[name]
        except KeyError:
            raise UnknownStrategyError(name) from None

    def names(self) -> list[str]:
        return sorted(self._strategies)

    async def run(self, name: str, request: Request) -> StrategyOutcome:
        """Run the named strategy against a request.

        Lookup failures and exceptions raised by the strategy are reported
        as ``StrategyError`` rather than raised.
        """
        try:
            strategy = self.get(name)
            return await strategy.authenticate(request)
        except Exception as e:
            logger.error("Authentication strategy failed", strategy=name, error=str(e))
            return StrategyError(e)


_strategy_registry: StrategyRegistry | None = None


def get_strategy_registry() -> StrategyRegistry:
    """Get the process-wide registry, with the ``jwt`` strategy registered."""
    global _strategy_registry
    if _strategy_registry is None:
        _strategy_registry = StrategyRegistry()
        _strategy_registry.register("jwt", JWTStrategy())
    return _strategy_registry
