# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masks credentials and contact details before a log line is written."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Signing secrets
    (
        re.compile(r"((?:secret[_-]?key|jwt[_-]?secret)\s*[:=]\s*['\"]?)([\w\-]{20,})", re.I),
        rf"\1{_REDACTED}",
    ),
    # Bearer tokens, bare or inside an Authorization header
    (re.compile(r"(bearer\s+)([\w\-.]{20,})", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"]{10,})", re.I), rf"\1{_REDACTED}"),
    # token=..., "token": "..."
    (re.compile(r"(\"?token\"?\s*[:=]\s*['\"]?)([\w\-.]{20,})", re.I), rf"\1{_REDACTED}"),
    # password=..., "password": "..."
    (
        re.compile(r"(\"?(?:password|pwd)\"?\s*[:=]\s*['\"]?)([^'\"\s,}]{1,})", re.I),
        rf"\1{_REDACTED}",
    ),
    # Credentials embedded in database URLs
    (
        re.compile(r"(postgresql|postgres|mysql|mariadb)(\+\w+)?://([^:/@]+):([^@]+)@"),
        rf"\1\2://\3:{_REDACTED}@",
    ),
    # Account emails keep only the domain
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})"), r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrites ``record["message"]`` in place, never drops a record."""

    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
