# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from marketplace.infrastructure.health import StoreProbe


class HealthController:
    def __init__(self, *, probe: StoreProbe) -> None:
        self._probe = probe

    def health(self) -> tuple[Response, int]:
        store = self._probe.check()
        payload: dict[str, object] = {"ok": store.ok, "database": store.detail}
        if store.ok:
            payload["accounts"] = store.accounts
            payload["listings"] = store.listings
            return jsonify(payload), HTTPStatus.OK
        return jsonify(payload), HTTPStatus.SERVICE_UNAVAILABLE

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("health", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp
