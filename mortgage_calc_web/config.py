"""Runtime configuration for the mortgage calculator web API.

Values are read from environment variables when the module is imported and
applied with ``app.config.from_object(Config)``.
"""

import os


class Config:
    ASSET_VERSION = os.environ.get("ASSET_VERSION", "1")
    DEBUG = os.environ.get("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Schedule responses are truncated to this many rows unless the client
    # asks for the full schedule.
    SCHEDULE_PREVIEW_ROWS = int(os.environ.get("SCHEDULE_PREVIEW_ROWS", "120"))

    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "8710"))


class TestingConfig(Config):
    TESTING = True
    SCHEDULE_PREVIEW_ROWS = 12
