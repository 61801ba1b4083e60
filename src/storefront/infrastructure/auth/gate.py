"""Authentication gate for FastAPI routes.

``passport_call`` turns a strategy name into a route dependency. Accepted
requests get ``request.state.user`` set and proceed; rejected requests end
with a 401 ``{"status": "error", "message": [...]}`` body; strategy faults
propagate unchanged.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request

from storefront.core.logging import get_logger
from storefront.infrastructure.auth.strategies import (
    Accepted,
    Rejected,
    StrategyError,
    StrategyRegistry,
    get_strategy_registry,
)

logger = get_logger(__name__)

# Rejection reasons reported by strategies mapped to user-facing messages.
REJECTION_MESSAGES: dict[str, str] = {
    "jwt expired": "El token ha expirado",
    "No auth token": "No se ha enviado el token",
    "invalid token": "El token es inválido",
}


class UnauthorizedError(Exception):
    """Raised when a request fails authentication.

    Rendered as HTTP 401 by the application's exception handler.
    """

    status_code = 401

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = messages

    def to_body(self) -> dict[str, Any]:
        return {"status": "error", "message": list(self.messages)}


def translate_rejection(reason: str) -> str:
    """Map a rejection reason to its user-facing message.

    Unknown reasons are returned unchanged.
    """
    return REJECTION_MESSAGES.get(reason, reason)


def passport_call(
    strategy: str,
    registry: StrategyRegistry | None = None,
) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency that authenticates requests with ``strategy``.

    Args:
        strategy: Name of a registered strategy.
        registry: Registry to resolve the name against. Defaults to the
            process-wide registry.

    Returns:
        An async dependency returning the authenticated identity.

    Example:
        @router.get("/current")
        async def current(user=Depends(passport_call("jwt"))):
            return user
    """

    async def authenticate(request: Request) -> Any:
        strategies = registry or get_strategy_registry()
        outcome = await strategies.run(strategy, request)

        if isinstance(outcome, StrategyError):
            raise outcome.cause

        if isinstance(outcome, Rejected):
            message = translate_rejection(outcome.reason)
            logger.info(
                "Authentication rejected",
                strategy=strategy,
                reason=outcome.reason,
                path=request.url.path,
            )
            raise UnauthorizedError([message])

        if isinstance(outcome, Accepted):
            request.state.user = outcome.identity
            return outcome.identity

        raise TypeError(f"Unexpected strategy outcome: {outcome!r}")

    return authenticate
