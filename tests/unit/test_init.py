"""
Unit tests for posprint/__init__.py: version metadata, public API and
package logging.
"""

import logging
import logging.handlers
import re
from pathlib import Path
from unittest import mock

import pytest

import posprint


class TestVersionMetadata:
    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", posprint.__version__)

    def test_version_components(self) -> None:
        expected = f"{posprint.VERSION_MAJOR}.{posprint.VERSION_MINOR}.{posprint.VERSION_PATCH}"
        assert posprint.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for value in (posprint.__description__, posprint.__license__, posprint.__python_requires__):
            assert isinstance(value, str) and value


class TestPublicAPI:
    def test_all_exports_exist(self) -> None:
        """Every name in __all__ must resolve on the package."""
        for name in posprint.__all__:
            assert hasattr(posprint, name), f"{name!r} listed in __all__ but missing"

    def test_no_duplicate_exports(self) -> None:
        assert len(posprint.__all__) == len(set(posprint.__all__))

    @pytest.mark.parametrize(
        "name",
        [
            "Printer",
            "AsyncPrinter",
            "PageBuilder",
            "StyleSet",
            "bold",
            "PrintBarcode",
            "PrintQrCode",
            "TransmitStatus",
            "CodePage",
            "load_config",
            "EncodingError",
        ],
    )
    def test_core_names_exported(self, name: str) -> None:
        assert name in posprint.__all__

    def test_command_subpackage_reexported(self) -> None:
        from posprint import commands

        assert set(commands.__all__) <= set(posprint.__all__)


class TestLogging:
    def test_get_logger_namespaced(self) -> None:
        assert posprint.get_logger("receipts").name == "posprint.receipts"

    def test_get_logger_keeps_package_names(self) -> None:
        assert posprint.get_logger("posprint.page").name == "posprint.page"
        assert posprint.get_logger("posprint").name == "posprint"

    def test_get_logger_main(self) -> None:
        assert posprint.get_logger("__main__").name == "posprint.main"

    def test_package_logger_configured(self) -> None:
        package_logger = logging.getLogger(posprint.LOGGER_NAME)
        assert package_logger.handlers
        assert package_logger.propagate is False

    def test_setup_is_idempotent(self) -> None:
        package_logger = logging.getLogger(posprint.LOGGER_NAME)
        before = list(package_logger.handlers)
        posprint._setup_logging()
        assert package_logger.handlers == before

    def test_level_and_file_from_environment(self, tmp_path: Path) -> None:
        """Re-running setup with a clean logger picks up the environment."""
        package_logger = logging.getLogger(posprint.LOGGER_NAME)
        saved_handlers = list(package_logger.handlers)
        saved_level = package_logger.level
        log_file = tmp_path / "posprint.log"
        env = {"POSPRINT_LOG_LEVEL": "DEBUG", "POSPRINT_LOG_FILE": str(log_file)}
        try:
            package_logger.handlers.clear()
            with mock.patch.dict("os.environ", env):
                posprint._setup_logging()
            assert package_logger.level == logging.DEBUG
            file_handlers = [
                h for h in package_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
            ]
            assert len(file_handlers) == 1
            posprint.get_logger("tests").debug("hello file")
            file_handlers[0].flush()
            assert "hello file" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in package_logger.handlers:
                handler.close()
            package_logger.handlers[:] = saved_handlers
            package_logger.setLevel(saved_level)

    def test_unknown_level_defaults_to_info(self) -> None:
        package_logger = logging.getLogger(posprint.LOGGER_NAME)
        saved_handlers = list(package_logger.handlers)
        saved_level = package_logger.level
        try:
            package_logger.handlers.clear()
            with mock.patch.dict("os.environ", {"POSPRINT_LOG_LEVEL": "CHATTY"}):
                posprint._setup_logging()
            assert package_logger.level == logging.INFO
        finally:
            package_logger.handlers[:] = saved_handlers
            package_logger.setLevel(saved_level)
