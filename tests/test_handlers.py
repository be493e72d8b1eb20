import io

import pytest

from src.config import ConsoleOutput, FileInput, LinesInput
from src.input_handler import FileInputHandler, LinesInputHandler, get_input_handler
from src.output_handler import ConsoleOutputHandler, get_output_handler


def test_lines_input_handler():
    handler = get_input_handler(LinesInput(type="lines", lines=["a,1,2", ""]))
    assert isinstance(handler, LinesInputHandler)
    seen = []
    handler.consume(seen.append)
    assert seen == ["a,1,2", ""]


def test_file_input_handler_strips_only_newlines(tmp_path):
    path = tmp_path / "climate.txt"
    path.write_bytes(b"Munich,2015,23.1\r\n Oslo ,2001,4.2 \n\nLast,1,1")
    handler = get_input_handler(FileInput(type="file", path=str(path)))
    assert isinstance(handler, FileInputHandler)
    assert list(handler.lines()) == ["Munich,2015,23.1", " Oslo ,2001,4.2 ", "", "Last,1,1"]


def test_file_input_handler_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Munich,2015,23.1\nManila,2001,bar\n"))
    handler = get_input_handler(FileInput(type="file", path="-"))
    assert list(handler.lines()) == ["Munich,2015,23.1", "Manila,2001,bar"]


def test_file_input_handler_missing_file(tmp_path):
    handler = get_input_handler(FileInput(type="file", path=str(tmp_path / "missing.txt")))
    with pytest.raises(FileNotFoundError):
        list(handler.lines())


def test_get_input_handler_unsupported():
    with pytest.raises(ValueError, match="Unsupported input type"):
        get_input_handler(object())


def test_console_output_handler(capsys):
    handler = get_output_handler(ConsoleOutput(type="console"))
    assert isinstance(handler, ConsoleOutputHandler)
    handler.publish('{"city": "Munich"}')
    handler.close()
    assert capsys.readouterr().out == '{"city": "Munich"}\n'


def test_console_output_handler_stderr(capsys):
    handler = get_output_handler(ConsoleOutput(type="console", stream="stderr"))
    handler.publish("oops")
    handler.close()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "oops\n"


def test_get_output_handler_unsupported():
    with pytest.raises(ValueError, match="Unsupported output type"):
        get_output_handler(object())
