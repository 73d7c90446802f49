"""
Tests for holidaycalc.config and holidaycalc.exceptions
"""
import os

import pytest

from holidaycalc.config import Settings
from holidaycalc.exceptions import (
    HolidayCalcError,
    InvalidDateRangeError,
    InvalidYearError,
    RegionNotFoundError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
)


class TestSettings:
    """Tests for Settings.from_env()."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.log_level == "INFO"
        assert settings.pack_paths == ()
        assert settings.default_region == "DE"
        assert settings.docs_enabled is True
        assert settings.strict_packs is True

    def test_from_environment(self):
        settings = Settings.from_env({
            "HOLIDAYCALC_LOG_LEVEL": "debug",
            "HOLIDAYCALC_PACK_PATH": os.pathsep.join(["/srv/packs", "", "/opt/packs"]),
            "HOLIDAYCALC_DEFAULT_REGION": "AT",
            "HOLIDAYCALC_DOCS_ENABLED": "false",
            "HOLIDAYCALC_STRICT_PACKS": "0",
        })
        assert settings.log_level == "DEBUG"
        assert settings.pack_paths == ("/srv/packs", "/opt/packs")
        assert settings.default_region == "AT"
        assert settings.docs_enabled is False
        assert settings.strict_packs is False

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("true", True), ("Yes", True), (" on ", True),
        ("0", False), ("no", False), ("", False),
    ])
    def test_flags(self, value, expected):
        assert Settings.from_env({"HOLIDAYCALC_DOCS_ENABLED": value}).docs_enabled is expected

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYCALC_DEFAULT_REGION", "CH")
        assert Settings.from_env().default_region == "CH"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Settings().log_level = "DEBUG"


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("error_type,code", [
        (RegionNotFoundError, "HC_REGION_NOT_FOUND"),
        (InvalidYearError, "HC_INVALID_YEAR"),
        (InvalidDateRangeError, "HC_INVALID_DATE_RANGE"),
        (RulePackLoadError, "HC_RULE_PACK_LOAD_ERROR"),
        (RulePackValidationError, "HC_RULE_PACK_VALIDATION_ERROR"),
        (RulePackVersionMismatch, "HC_RULE_PACK_VERSION_MISMATCH"),
    ])
    def test_codes(self, error_type, code):
        error = error_type(message="boom")
        assert error.code == code
        assert isinstance(error, HolidayCalcError)
        assert isinstance(error, Exception)

    def test_str(self):
        assert str(RegionNotFoundError(message="Unknown region 'ZZ'", region_id="ZZ")) == (
            "[HC_REGION_NOT_FOUND] Unknown region 'ZZ' (region: ZZ)"
        )
        assert str(HolidayCalcError(message="boom")) == "[HC_INTERNAL_ERROR] boom"

    def test_to_dict(self):
        error = InvalidYearError(message="Year 1500 out of range", details={"year": 1500})
        assert error.to_dict() == {
            "code": "HC_INVALID_YEAR",
            "message": "Year 1500 out of range",
            "details": {"year": 1500},
        }

    def test_to_dict_with_region(self):
        error = RegionNotFoundError(message="Unknown region", region_id="ZZ")
        assert error.to_dict()["region_id"] == "ZZ"
        assert "details" not in error.to_dict()

    def test_raise_and_catch(self):
        with pytest.raises(HolidayCalcError):
            raise InvalidDateRangeError(message="First day is after last day")
