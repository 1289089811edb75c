from pathlib import Path

import pytest

from moduledocs.config import DEFAULT_TASK_NAME, Config, ConfigError, load_config, parse_config


def test_defaults_without_config_file(tmp_path: Path) -> None:
    assert load_config(tmp_path) == Config()
    assert Config().task_name == DEFAULT_TASK_NAME == "SettingsGradleWbs"


def test_project_config_file_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / "moduledocs.yaml").write_text("project_name: Demo\nbuild_dir: out\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg == Config(project_name="Demo", build_dir="out", task_name=DEFAULT_TASK_NAME)


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_empty_document_is_default() -> None:
    assert parse_config("") == Config()


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "theme: dark\n",
        "project_name: 3\n",
        "task_name: '  '\n",
    ],
)
def test_invalid_config_is_rejected(text: str) -> None:
    with pytest.raises(ConfigError):
        parse_config(text)


def test_invalid_yaml_is_config_error(tmp_path: Path) -> None:
    (tmp_path / "moduledocs.yaml").write_text("project_name: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_overrides_skip_none() -> None:
    cfg = Config(project_name="FromFile", build_dir="out").with_overrides(project_name="FromFlag", build_dir=None)
    assert cfg.project_name == "FromFlag"
    assert cfg.build_dir == "out"
    with pytest.raises(ConfigError):
        cfg.with_overrides(theme="dark")
