"""
tests/unit/test_logging_config.py — structlog renderer selection.
"""
from __future__ import annotations

import structlog

from patient_registry.config import Settings
from patient_registry.logging_config import configure_logging


class TestConfigureLogging:
    def teardown_method(self):
        configure_logging(Settings(environment="development"))

    def test_production_renders_json(self):
        configure_logging(Settings(environment="production"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        configure_logging(Settings(environment="development"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
