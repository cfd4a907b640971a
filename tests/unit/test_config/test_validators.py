"""
Unit tests for configuration validation functionality.

Tests the validation of the runtime, report and logging sections, including
defaults and error reporting.
"""

import pytest

from dockmem.config.validators import (
    validate_app_config,
    validate_logging_config,
    validate_report_config,
    validate_runtime_config,
)
from dockmem.models.config import AppConfig
from dockmem.validation import ValidationError


@pytest.mark.unit
class TestAppConfigValidation:
    """Test cases for whole-document validation."""

    def test_validate_full_config(self, sample_config_data):
        config = validate_app_config(sample_config_data)

        assert config.runtime.base_url == "unix:///var/run/docker.sock"
        assert config.runtime.timeout == 5.0
        assert config.report.show_percentage is True
        assert config.report.column_padding == 2
        assert config.report.title == "Memory"
        assert config.logging.level == "DEBUG"

    def test_empty_document_uses_defaults(self):
        assert validate_app_config({}) == AppConfig()

    def test_section_must_be_table(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_app_config({"report": "yes"})
        assert exc_info.value.field_name == "report"


@pytest.mark.unit
class TestRuntimeConfigValidation:

    def test_empty_base_url_means_environment(self):
        assert validate_runtime_config({"base_url": "  "}).base_url is None

    @pytest.mark.parametrize("timeout", [0, -1, 601, "soon"])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValidationError) as exc_info:
            validate_runtime_config({"timeout": timeout})
        assert "runtime.timeout" in str(exc_info.value)

    def test_base_url_must_be_string(self):
        with pytest.raises(ValidationError):
            validate_runtime_config({"base_url": 2375})


@pytest.mark.unit
class TestReportConfigValidation:

    def test_disable_percentage(self):
        assert validate_report_config({"show_percentage": False}).show_percentage is False

    def test_show_percentage_must_be_boolean(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_report_config({"show_percentage": "false"})
        assert "report.show_percentage" in str(exc_info.value)

    @pytest.mark.parametrize("padding", [0, 17, True, "wide"])
    def test_invalid_padding(self, padding):
        with pytest.raises(ValidationError):
            validate_report_config({"column_padding": padding})

    def test_empty_title_allowed(self):
        assert validate_report_config({"title": ""}).title == ""


@pytest.mark.unit
class TestLoggingConfigValidation:

    def test_level_is_case_insensitive(self):
        assert validate_logging_config({"level": "warning"}).level == "WARNING"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            validate_logging_config({"level": "LOUD"})
