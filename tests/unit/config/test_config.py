"""
Tests for posprint/config.py

Tests for: parse_code_page, PrinterConfig validation and round trip,
load_config fallback on missing or malformed files, environment overrides
and applying the configured log level to the package logger.
"""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from posprint.commands.codepage import CodePage
from posprint.commands.page_mode import PrintArea
from posprint.config import PrinterConfig, load_config, parse_code_page


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POSPRINT_DEVICE", "POSPRINT_CODE_PAGE", "POSPRINT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_log_level() -> Iterator[None]:
    logger = logging.getLogger("posprint")
    saved = logger.level
    yield
    logger.setLevel(saved)


@pytest.fixture
def caplog_posprint(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    # package logger does not propagate; attach caplog directly
    logger = logging.getLogger("posprint")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="posprint")
    yield caplog
    logger.removeHandler(caplog.handler)


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseCodePage:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("CP866", CodePage.CP866),
            ("cp866", CodePage.CP866),
            (" win1251 ", CodePage.WIN1251),
            ("17", CodePage.CP866),
            (17, CodePage.CP866),
            (CodePage.CP850, CodePage.CP850),
        ],
    )
    def test_valid(self, value: object, expected: CodePage) -> None:
        assert parse_code_page(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["EBCDIC", "99", 99, True, 1.5, None])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_code_page(value)  # type: ignore[arg-type]


class TestPrinterConfig:
    def test_defaults(self) -> None:
        config = PrinterConfig.from_dict({})
        assert config.device == "/dev/usb/lp0"
        assert config.code_page is CodePage.CP437
        assert config.paper_width_mm == 80
        assert config.line_spacing is None
        assert config.encoding_errors == "strict"
        assert config.log_level == "INFO"

    def test_unknown_keys_ignored(self) -> None:
        assert PrinterConfig.from_dict({"colour": "red"}) == PrinterConfig.from_dict({})

    @pytest.mark.parametrize(
        "data",
        [
            {"device": ""},
            {"device": 5},
            {"paper_width_mm": 76},
            {"line_spacing": 256},
            {"line_spacing": True},
            {"encoding_errors": "ignore"},
            {"log_level": "LOUD"},
            {"code_page": "nope"},
        ],
    )
    def test_invalid_values(self, data: dict) -> None:
        with pytest.raises(ValueError):
            PrinterConfig.from_dict(data)

    def test_to_dict_round_trip(self) -> None:
        config = PrinterConfig.from_dict({"code_page": "CP866", "paper_width_mm": 58})
        data = config.to_dict()
        assert data["code_page"] == "CP866"
        assert PrinterConfig.from_dict(data) == config

    def test_print_area(self) -> None:
        assert PrinterConfig.from_dict({"paper_width_mm": 58}).print_area() == PrintArea.default_58mm()
        assert PrinterConfig.from_dict({}).print_area() == PrintArea.default_80mm()

    def test_encoder_policy(self) -> None:
        config = PrinterConfig.from_dict({"encoding_errors": "replace"})
        assert config.encoder().errors == "replace"


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path, caplog_posprint: pytest.LogCaptureFixture) -> None:
        config = load_config(tmp_path / "absent.json")
        assert config == PrinterConfig.from_dict({})
        assert "not found" in caplog_posprint.text

    def test_file_values_merged(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "p.json", {"device": "/dev/usb/lp1", "code_page": "CP866"})
        config = load_config(path)
        assert config.device == "/dev/usb/lp1"
        assert config.code_page is CodePage.CP866
        assert config.paper_width_mm == 80

    def test_malformed_json(self, tmp_path: Path, caplog_posprint: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config(path) == PrinterConfig.from_dict({})
        assert "invalid JSON" in caplog_posprint.text

    def test_not_an_object(self, tmp_path: Path, caplog_posprint: pytest.LogCaptureFixture) -> None:
        path = write_json(tmp_path / "list.json", [1, 2])
        assert load_config(path) == PrinterConfig.from_dict({})
        assert "JSON object" in caplog_posprint.text

    def test_invalid_value_falls_back(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "p.json", {"paper_width_mm": 100, "device": "/dev/x"})
        assert load_config(path).device == "/dev/usb/lp0"

    def test_default_path_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_json(tmp_path / "posprint.json", {"paper_width_mm": 58})
        monkeypatch.chdir(tmp_path)
        assert load_config().paper_width_mm == 58


class TestEnvironment:
    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = write_json(tmp_path / "p.json", {"device": "/dev/usb/lp1", "code_page": "CP866"})
        monkeypatch.setenv("POSPRINT_DEVICE", "/dev/usb/lp7")
        monkeypatch.setenv("POSPRINT_CODE_PAGE", "WIN1251")
        monkeypatch.setenv("POSPRINT_LOG_LEVEL", "debug")
        config = load_config(path)
        assert config.device == "/dev/usb/lp7"
        assert config.code_page is CodePage.WIN1251
        assert config.log_level == "DEBUG"

    def test_invalid_env_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog_posprint: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("POSPRINT_CODE_PAGE", "KLINGON")
        monkeypatch.setenv("POSPRINT_LOG_LEVEL", "LOUD")
        config = load_config(tmp_path / "absent.json")
        assert config.code_page is CodePage.CP437
        assert config.log_level == "INFO"
        assert "POSPRINT_CODE_PAGE" in caplog_posprint.text
        assert "POSPRINT_LOG_LEVEL" in caplog_posprint.text


class TestLogLevel:
    def test_file_level_applied_to_package_logger(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "p.json", {"log_level": "debug"})
        config = load_config(path)
        assert config.log_level == "DEBUG"
        assert logging.getLogger("posprint").level == logging.DEBUG

    def test_env_level_wins_over_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = write_json(tmp_path / "p.json", {"log_level": "DEBUG"})
        monkeypatch.setenv("POSPRINT_LOG_LEVEL", "ERROR")
        load_config(path)
        assert logging.getLogger("posprint").level == logging.ERROR

    def test_default_level_applied(self, tmp_path: Path) -> None:
        logging.getLogger("posprint").setLevel(logging.CRITICAL)
        load_config(tmp_path / "absent.json")
        assert logging.getLogger("posprint").level == logging.INFO
