"""Tests for engine configuration."""

import json
import logging

from xtype.config import EngineConfig, load_config, save_config


class TestEngineConfig:
    """Tests for EngineConfig dataclass."""

    def test_default_values(self):
        """Defaults should be lenient and guarded."""
        config = EngineConfig()
        assert config.strict is False
        assert config.guard_rerender is True
        assert config.tag_tables == []
        assert config.log_level == "WARNING"

    def test_from_dict_ignores_unknown(self, caplog):
        """Unknown keys should be dropped."""
        with caplog.at_level(logging.WARNING):
            config = EngineConfig.from_dict({"strict": True, "colour": "blue"})
        assert config.strict is True
        assert "colour" in caplog.text

    def test_from_dict_single_table(self):
        """A single table name should become a list."""
        assert EngineConfig.from_dict({"tag_tables": "svg"}).tag_tables == ["svg"]

    def test_from_dict_not_a_dict(self):
        """A non-mapping should give the defaults."""
        assert EngineConfig.from_dict(["strict"]) == EngineConfig()

    def test_roundtrip_dict(self):
        """to_dict output should rebuild an equal config."""
        config = EngineConfig(strict=True, tag_tables=["html"])
        assert EngineConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for loading config files."""

    def test_missing_file_defaults(self, tmp_path):
        """A missing file should give the defaults."""
        assert load_config(tmp_path / "none.json") == EngineConfig()

    def test_none_defaults(self):
        """No path should give the defaults."""
        assert load_config(None) == EngineConfig()

    def test_load_json(self, tmp_path):
        """JSON config files should load."""
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"guard_rerender": False}))
        assert load_config(path).guard_rerender is False

    def test_load_yaml(self, tmp_path):
        """YAML config files should load."""
        path = tmp_path / "engine.yaml"
        path.write_text("strict: true\ntag_tables:\n  - svg\n")
        config = load_config(path)
        assert config.strict is True
        assert config.tag_tables == ["svg"]

    def test_invalid_json_defaults(self, tmp_path, caplog):
        """Unparseable files should warn and give the defaults."""
        path = tmp_path / "engine.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            assert load_config(path) == EngineConfig()
        assert "Failed to load config" in caplog.text

    def test_save_and_load(self, tmp_path):
        """A saved config should load back equal."""
        path = tmp_path / "engine.json"
        save_config(EngineConfig(log_level="DEBUG"), path)
        assert load_config(path).log_level == "DEBUG"
        assert not path.with_suffix(".tmp").exists()
