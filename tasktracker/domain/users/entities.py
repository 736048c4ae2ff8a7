# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Decoded content of a session token."""

    owner_id: str
    issued_at: datetime
    expires_at: datetime


def normalize_email(email: str) -> str:
    """E-mail addresses are unique case-insensitively; they are stored lower-cased."""

    return email.strip().lower()
