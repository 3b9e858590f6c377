from __future__ import annotations

import io
import logging
import sys
from typing import Iterator

import pytest

from naturalset.fibonacci import main, run, sequence, sequence_upto


def test_sequence() -> None:
    assert list(sequence(0)) == []
    assert list(sequence(1)) == [0]
    assert list(sequence(10)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_sequence_upto() -> None:
    assert list(sequence_upto(0)) == [0]
    assert list(sequence_upto(1)) == [0, 1, 1]
    assert list(sequence_upto(50)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_main_count() -> None:
    out = io.StringIO()
    assert main(["10"], output=out) == 0
    assert out.getvalue() == "0 1 1 2 3 5 8 13 21 34\n"


def test_main_max() -> None:
    out = io.StringIO()
    assert main(["--max", "50"], output=out) == 0
    assert out.getvalue() == "0 1 1 2 3 5 8 13 21 34\n"


def test_main_default_args(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    terms = capsys.readouterr().out.split()
    assert len(terms) == 20
    assert terms[-1] == "4181"


def test_main_zero_terms() -> None:
    out = io.StringIO()
    assert main(["0"], output=out) == 0
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("argv", [["-1"], ["ten"]])
def test_main_invalid(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_main_verbose_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="naturalset"):
        main(["-vv", "3"], output=io.StringIO())
    assert "printing 3 terms" in caplog.text


@pytest.fixture  # type: ignore[misc]
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("naturalset")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_main_leaves_logging_alone(package_logger: logging.Logger) -> None:
    before = list(package_logger.handlers)
    main(["-vv", "3"], output=io.StringIO())
    assert package_logger.handlers == before


def test_run_configures_logging_once(
    package_logger: logging.Logger,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["naturalset-fibonacci", "-vv", "5"])
    assert run() == 0
    assert run() == 0

    assert len(package_logger.handlers) == 1
    (handler,) = package_logger.handlers
    assert handler.level == logging.DEBUG
    assert package_logger.level == logging.DEBUG
    assert not package_logger.propagate

    captured = capsys.readouterr()
    assert captured.out == "0 1 1 2 3\n0 1 1 2 3\n"
