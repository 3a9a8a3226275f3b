"""Shared fixtures for shape tests."""

import json

import pytest
from structlog.testing import capture_logs

import shapes


@pytest.fixture
def user_shape():
    """Named User shape with an optional array property."""
    return shapes.object("User", {
        "name": shapes.string(),
        "age": shapes.number(),
        "hasSignedIn": shapes.boolean(),
        "permissions": shapes.optional(shapes.array(shapes.string())),
    })


@pytest.fixture
def valid_user():
    return json.loads(
        '{"name": "jakob", "age": 29, "hasSignedIn": true, "permissions": ["developer", "admin"]}'
    )


@pytest.fixture
def diagnostics():
    """Capture structlog events emitted while the test body runs."""
    with capture_logs() as logs:
        yield logs
