# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .access_guard import AccessGuard, extract_bearer_token
from .password_hashing import WerkzeugPasswordHasher
from .token_service import DEFAULT_TOKEN_TTL, SignedTokenService

__all__ = [
    "DEFAULT_TOKEN_TTL",
    "AccessGuard",
    "SignedTokenService",
    "WerkzeugPasswordHasher",
    "extract_bearer_token",
]
