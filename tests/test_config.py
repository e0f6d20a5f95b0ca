"""Tests for config loading and the command line entry point."""

import pytest

from config_utils import ConfigError, build_plugins, load_config
from plugins import ConcatTextPlugin
from run import main


CONFIG = """
context: .
output:
  path: dist
  filename: main.js
plugins:
  concat_text:
    - files: "src/*.txt"
    - files: "src/*.{txt,md}"
      outputPath: extra
      sort: true
"""


def write_project(tmp_path, config_text=CONFIG):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("A")
    (src / "b.md").write_text("B")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_text)
    return config_file


def test_load_config_resolves_paths(tmp_path):
    config = load_config(str(write_project(tmp_path)))

    assert config.context == str(tmp_path)
    assert config.output.path == str(tmp_path / "dist")
    assert config.output.filename == "main.js"
    assert len(config.plugins["concat_text"]) == 2


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "nope.yaml"))


def test_build_plugins(tmp_path):
    plugins = build_plugins(load_config(str(write_project(tmp_path))))

    assert len(plugins) == 2
    assert all(isinstance(p, ConcatTextPlugin) for p in plugins)
    assert plugins[1].options.output_path == "extra"
    assert plugins[1].options.sort is True


def test_build_plugins_unknown_plugin(tmp_path):
    config_file = write_project(tmp_path, "plugins:\n  minify: [{}]\n")

    with pytest.raises(ConfigError, match="Unknown plugin"):
        build_plugins(load_config(str(config_file)))


def test_build_plugins_invalid_options(tmp_path):
    config_file = write_project(tmp_path, "plugins:\n  concat_text:\n    - name: x.txt\n")

    with pytest.raises(ConfigError, match="Invalid options"):
        build_plugins(load_config(str(config_file)))


@pytest.mark.asyncio
async def test_main_runs_build(tmp_path):
    config_file = write_project(tmp_path)

    exit_code = await main(["--config", str(config_file)])

    assert exit_code == 0
    assert (tmp_path / "dist" / "main.txt").read_text() == "A"
    assert (tmp_path / "dist" / "extra" / "main").read_text() == "A\nB"


@pytest.mark.asyncio
async def test_main_reports_config_error(tmp_path):
    exit_code = await main(["--config", str(tmp_path / "missing.yaml")])

    assert exit_code == 1
