"""Config loading"""

import pytest

from binvis.config import DEFAULTS, cfg_get, load_config
from binvis.errors import ConfigError


def test_defaults_without_file():
    cfg = load_config()
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS


def test_cfg_get():
    cfg = {"a": {"b": {"c": 3}}}
    assert cfg_get(cfg, "a.b.c") == 3
    assert cfg_get(cfg, "a.x", "d") == "d"
    assert cfg_get(cfg, "a.b.c.d", None) is None


def test_file_overrides_defaults(tmp_path):
    p = tmp_path / "binvis.yaml"
    p.write_text("analysis:\n  workers: 3\nextra: ignored\n")
    cfg = load_config(p)
    assert cfg_get(cfg, "analysis.workers") == 3
    assert cfg_get(cfg, "output.progress") is False
    assert cfg_get(cfg, "output.compress_level") == 6


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "binvis.yaml"
    p.write_text("")
    assert load_config(p) == DEFAULTS


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize("text", [
    "analysis:\n  workers: -1\n",
    "analysis:\n  workers: true\n",
    "analysis: 4\n",
    "output:\n  progress: maybe\n",
    "output:\n  compress_level: 10\n",
    "- just\n- a list\n",
    "analysis: [unclosed\n",
])
def test_invalid_config(tmp_path, text):
    p = tmp_path / "binvis.yaml"
    p.write_text(text)
    with pytest.raises(ConfigError):
        load_config(p)
