"""Authentication infrastructure components.

This module provides password hashing, token issuing, named authentication
strategies and the route gate that runs them.
"""

from storefront.infrastructure.auth.gate import (
    REJECTION_MESSAGES,
    UnauthorizedError,
    passport_call,
    translate_rejection,
)
from storefront.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
    generate_token,
)
from storefront.infrastructure.auth.password_hasher import (
    hash_password,
    is_valid_password,
    needs_rehash,
    verify_password,
)
from storefront.infrastructure.auth.strategies import (
    Accepted,
    AuthStrategy,
    JWTStrategy,
    Rejected,
    StrategyError,
    StrategyOutcome,
    StrategyRegistry,
    UnknownStrategyError,
    get_strategy_registry,
)

__all__ = [
    "Accepted",
    "AuthStrategy",
    "InvalidTokenError",
    "JWTError",
    "JWTService",
    "JWTStrategy",
    "REJECTION_MESSAGES",
    "Rejected",
    "StrategyError",
    "StrategyOutcome",
    "StrategyRegistry",
    "TokenExpiredError",
    "UnauthorizedError",
    "UnknownStrategyError",
    "generate_token",
    "get_strategy_registry",
    "hash_password",
    "is_valid_password",
    "needs_rehash",
    "passport_call",
    "translate_rejection",
    "verify_password",
]
