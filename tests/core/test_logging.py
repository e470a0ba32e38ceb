# tests/core/test_logging.py
"""Tests for logging configuration."""

import json
import logging

import pytest
import structlog

from optionkit.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("DEBUG", json_output=True)

        get_logger("optionkit.test").info("Option saved", name="BANNER_POSITION")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Option saved"
        assert event["name"] == "BANNER_POSITION"
        assert event["logger"] == "optionkit.test"
        assert event["level"] == "info"

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING", json_output=True)

        logger = get_logger("optionkit.test")
        logger.debug("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO")

        get_logger("optionkit.test").info("Option removed", name="BANNER_DELAY")

        err = capsys.readouterr().err
        assert "Option removed" in err
        assert "BANNER_DELAY" in err

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("CHATTY")


class TestModuleLoggers:
    def test_module_logger_emits_after_configuration(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from optionkit.plugins import configuration as configuration_module

        configure_logging("DEBUG", json_output=True)
        configuration_module.logger.info("Module logger ready")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "Module logger ready"
        assert event["logger"] == "optionkit.plugins.configuration"

    def test_failed_default_write_is_logged(
        self,
        capsys: pytest.CaptureFixture[str],
        make_configuration,
        recording_store_cls,
    ) -> None:
        configure_logging("WARNING", json_output=True)
        configuration = make_configuration(
            store=recording_store_cls(fail_on={"BANNER_POSITION"})
        )

        assert configuration.set_option_default_value("position") is False

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "Option default not written"
        assert event["name"] == "BANNER_POSITION"
        assert event["logger"] == "optionkit.plugins.configuration"
        assert event["level"] == "warning"

    def test_bound_values_are_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO", json_output=True)

        get_logger("optionkit.test", module="banner").info("Bound")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["module"] == "banner"
        assert event["logger"] == "optionkit.test"
