from __future__ import annotations

import pytest

from smart_styles.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="chatty")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_loggers_are_cached_until_reconfigured() -> None:
    first = telemetry.get_logger("smart_styles.tests")

    assert telemetry.get_logger("smart_styles.tests") is first

    telemetry.configure(preset="quiet")
    try:
        assert telemetry.get_logger("smart_styles.tests") is not first
    finally:
        telemetry.configure()


def test_span_reraises_and_yields_handle() -> None:
    with telemetry.span("tests::ok", component=True) as handle:
        handle.add_metadata("count", 3)
    assert handle.component_name == "tests::ok"
    assert handle.metadata["count"] == "3"

    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom"):
            raise RuntimeError("boom")


def test_settings_read_prefixed_environment() -> None:
    settings = telemetry.TelemetrySettings.from_env(
        {
            "SMART_STYLES_LOG_LEVEL": "debug",
            "SMART_STYLES_NO_COLOR": "yes",
            "SMART_STYLES_LOG_FILE": "engine.log",
            "LOG_JSON": "1",
        }
    )

    assert settings == telemetry.TelemetrySettings(
        level="DEBUG", colored=False, log_file="engine.log"
    )


def test_quiet_preset_keeps_console_silent() -> None:
    quiet = telemetry.PRESETS["quiet"]

    assert quiet.level == "ERROR"
    assert quiet.console is False
