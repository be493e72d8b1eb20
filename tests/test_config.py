import pytest

import src.config as config_module
from src.config import (
    ClimateParserConfig,
    ConsoleOutput,
    FileInput,
    LinesInput,
    MetricsConfig,
    get_config,
)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "parser-config.yaml"
    monkeypatch.setattr(config_module, "CONFIG_PATH", str(path))
    return path


def test_load_full_config(config_file):
    config_file.write_text(
        "input:\n"
        "  type: lines\n"
        "  lines:\n"
        "    - 'Hong Kong,1999,25.7'\n"
        "parser:\n"
        "  parse_to: json\n"
        "  delimiter: ';'\n"
        "  fail_fast: false\n"
        "output:\n"
        "  type: console\n"
        "  stream: stderr\n"
        "  indent: null\n"
        "logging:\n"
        "  level: DEBUG\n"
        "metrics:\n"
        "  enabled: true\n"
        "  port: 9100\n"
    )
    cfg = get_config()
    assert isinstance(cfg.input, LinesInput)
    assert cfg.input.lines == ["Hong Kong,1999,25.7"]
    assert cfg.parser.delimiter == ";"
    assert cfg.parser.fail_fast is False
    assert cfg.output.stream == "stderr"
    assert cfg.output.indent is None
    assert cfg.logging.level == "DEBUG"
    assert cfg.metrics.enabled is True
    assert cfg.metrics.port == 9100


def test_load_defaults(config_file):
    config_file.write_text("input:\n  type: file\n")
    cfg = ClimateParserConfig.load()
    assert isinstance(cfg.input, FileInput)
    assert cfg.input.path == "-"
    assert cfg.parser.delimiter == ","
    assert cfg.parser.fail_fast is True
    assert isinstance(cfg.output, ConsoleOutput)
    assert cfg.output.indent == 4
    assert cfg.logging.level == "INFO"
    assert cfg.metrics.enabled is False


def test_load_missing_file(config_file):
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        ClimateParserConfig.load()


@pytest.mark.parametrize("content", [
    "",                                      # no input section
    "input:\n  type: kafka\n",               # unsupported input type
    "input:\n  type: lines\n  lines: []\nparser:\n  delimiter: ''\n",
    "input:\n  type: lines\n  lines: []\nlogging:\n  level: TRACE\n",
    "- just\n- a list\n",
])
def test_load_invalid_config(config_file, content):
    config_file.write_text(content)
    with pytest.raises(ValueError, match="Invalid configuration"):
        ClimateParserConfig.load()


@pytest.mark.parametrize("port", [0, 70000])
def test_metrics_port_out_of_range(port):
    with pytest.raises(ValueError):
        MetricsConfig(port=port)
