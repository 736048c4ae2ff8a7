# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

# (pattern, replacement); order matters, credentials before e-mail masking.
SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)([^\s'\"]{4,})", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(bearer\s+)([\w\-\.]{8,})", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(token\s*[:=]\s*['\"]?)([\w\-\.]{20,})", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(password(?:_hash)?\s*[:=]\s*['\"]?)([^'\"\s,}]+)", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"\b(scrypt|pbkdf2)(:[^\s$]*)\$[^\s'\",}]+"), rf"\1:{_REDACTED}"),
    (
        re.compile(r"(postgres(?:ql)?(?:\+\w+)?|mysql(?:\+\w+)?)://([^:/@\s]+):([^@\s]+)@"),
        rf"\1://\2:{_REDACTED}@",
    ),
    (re.compile(r"(authorization\s*[:=]\s*['\"]?)([^'\"]{10,})", re.I), rf"\1{_REDACTED}"),
    # Keep the domain so operators can still tell tenants apart.
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrite the message in place and always keep the record."""
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["SENSITIVE_PATTERNS", "sanitize_message", "sanitize_record"]
