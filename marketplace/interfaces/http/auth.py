# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token guard for controller methods."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from marketplace.shared.logging import logger

_BEARER_SCHEME = "bearer"


def bearer_token() -> str | None:
    header = request.headers.get("Authorization", "").strip()
    scheme, _, value = header.partition(" ")
    if scheme.lower() == _BEARER_SCHEME:
        header = value.strip()
    return header or None


def auth_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Resolve the caller's account id and pass it as the first view argument."""

    @wraps(view)
    def inner(self: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            account_id = self._tokens.validate(bearer_token())
        except Exception:
            logger.warning(f"Auth failed on {request.method} {request.path}")
            raise
        g.account_id = account_id
        logger.debug(f"Auth OK: account={account_id} {request.method} {request.path}")
        return view(self, account_id, *args, **kwargs)

    return inner
