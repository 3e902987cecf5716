# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request correlation ids and access log lines."""

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from marketplace.shared.config import load_config
from marketplace.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_SECRET_PARAM_HINTS = ("password", "token", "secret", "key")


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _SECRET_HEADERS else value
        for name, value in headers.items()
    }


def _safe_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "<redacted>" if any(hint in name.lower() for hint in _SECRET_PARAM_HINTS) else value
        for name, value in params.items()
    }


def _client_address() -> str:
    route = request.access_route
    return route[0] if route else (request.remote_addr or "unknown")


def configure_request_logging(app: Flask) -> None:
    """Tag every request with a correlation id and log its start and outcome.

    An incoming ``X-Request-ID`` is reused so ids can be followed across
    services; otherwise a short random id is minted. The id is echoed back on
    the response.
    """

    verbose = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8))
        g.request_started = time.perf_counter()
        if verbose:
            logger.info(
                f"http.start: {request.method} {request.path} from {_client_address()} "
                f"query={_safe_params(request.args)} headers={_safe_headers(request.headers)} "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"http.start: {request.method} {request.path} from {_client_address()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed = time.perf_counter() - g.get("request_started", time.perf_counter())
        account = g.get("account_id")
        logger.info(
            f"http.end: {request.method} {request.path} status={response.status_code} "
            f"duration={elapsed:.3f}s account={account if account is not None else '-'}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _clear(_: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
