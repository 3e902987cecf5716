# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""WSGI entrypoint, e.g. ``gunicorn marketplace.wsgi:app``."""

from marketplace.app import create_app

app = create_app()
