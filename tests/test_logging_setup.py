import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from pickup_catalog.logging_setup import ConsoleFormatter, setup_logging, wants_color


class FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def make_record(level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord("pickup_catalog.test", level, __file__, 1, "hello", None, None)


class TestConsoleFormatter:
    def test_colors_the_level_name(self) -> None:
        formatter = ConsoleFormatter(fmt="%(levelname)s %(message)s", use_color=True)

        assert formatter.format(make_record()) == "\033[93mWARNING\033[0m hello"

    def test_plain_output_without_color(self) -> None:
        formatter = ConsoleFormatter(fmt="%(levelname)s %(message)s", use_color=False)

        assert formatter.format(make_record()) == "WARNING hello"

    def test_record_is_left_untouched(self) -> None:
        record = make_record()

        ConsoleFormatter(fmt="%(levelname)s", use_color=True).format(record)

        assert record.levelname == "WARNING"


class TestWantsColor:
    def test_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert wants_color(FakeTerminal())

    def test_no_color_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert not wants_color(FakeTerminal())

    def test_redirected_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

        assert not wants_color(io.StringIO())


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    def test_writes_log_file(self, tmp_path: Path) -> None:
        # Given
        log_dir = tmp_path / "logs"

        # When
        setup_logging(console_level="ERROR", log_dir=str(log_dir))
        logging.getLogger("pickup_catalog.test").info("catalog loaded")
        for handler in logging.getLogger().handlers:
            handler.flush()

        # Then
        content = (log_dir / "pickup_catalog.log").read_text(encoding="utf-8")
        assert "catalog loaded" in content
        assert "\033[" not in content

    def test_quietens_http_client_loggers(self) -> None:
        setup_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
