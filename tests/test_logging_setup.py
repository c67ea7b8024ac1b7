import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checks import logging_setup


def _read_json_log(capfd):
    output = capfd.readouterr().err
    line = next(line for line in output.splitlines() if line.strip())
    return json.loads(line)


def test_configure_logging_emits_json_on_stderr(capfd):
    logging_setup.configure_logging("check-tests", "INFO")
    logging.getLogger("checks").info("hello")

    record = _read_json_log(capfd)
    assert record["message"] == "hello"
    assert record["service"] == "check-tests"
    assert record["levelname"] == "INFO"


def test_configure_logging_keeps_stdout_clean(capfd):
    logging_setup.configure_logging("check-tests", "DEBUG")
    logging.getLogger("checks").warning("careful")

    captured = capfd.readouterr()
    assert captured.out == ""
    assert "careful" in captured.err


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    before = len(root.handlers)

    logging_setup.configure_logging("check-tests")
    logging_setup.configure_logging("check-tests")

    assert len(root.handlers) == before + 1


def test_reset_logging_restores_root_level():
    root = logging.getLogger()
    previous = root.level

    logging_setup.configure_logging("check-tests", "DEBUG")
    assert root.level == logging.DEBUG

    logging_setup.reset_logging()
    assert root.level == previous


def test_default_level_hides_info(capfd):
    logging_setup.configure_logging()
    logging.getLogger("checks").info("quiet")

    assert "quiet" not in capfd.readouterr().err
