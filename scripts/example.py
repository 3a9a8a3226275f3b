#!/usr/bin/env python3
"""Parse a literal User payload and print it if it has the expected shape."""
import json

import shapes
from shapes.config import settings
from shapes.logging import configure_logging

User = shapes.object("User", {
    "name": shapes.string(),
    "age": shapes.number(),
    "hasSignedIn": shapes.boolean(),
    "permissions": shapes.optional(shapes.array(shapes.string())),
})

PAYLOAD = '{"name": "jakob", "age": 29, "hasSignedIn": true, "permissions": ["developer", "admin"]}'


def main(payload: str = PAYLOAD):
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    parsed = json.loads(payload)

    if User.check(parsed):
        print(parsed)


if __name__ == "__main__":
    main()
