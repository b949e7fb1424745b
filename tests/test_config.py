import json

import pytest

from keysum_cli.config import SummarizerConfig, write_default_config


def test_defaults():
    cfg = SummarizerConfig()
    assert cfg.top_words == 15
    assert cfg.bullet == "• "
    assert cfg.headers == {}


def test_dump_and_load(tmp_path):
    path = tmp_path / "keysum.json"
    cfg = SummarizerConfig(top_words=3, bullet="- ", headers={"Accept-Language": "en"})
    path.write_text(cfg.dump(), encoding="utf-8")
    assert SummarizerConfig.load(path) == cfg


def test_load_json_str_fills_missing_keys():
    cfg = SummarizerConfig.load_json_str(json.dumps({"top_words": "7"}))
    assert cfg.top_words == 7
    assert cfg.user_agent == "KeySum/0.1"


def test_write_default_config_refuses_to_overwrite(tmp_path):
    path = tmp_path / "keysum.json"
    write_default_config(path)
    assert json.loads(path.read_text(encoding="utf-8"))["top_words"] == 15
    with pytest.raises(FileExistsError):
        write_default_config(path)
