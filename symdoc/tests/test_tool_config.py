import json
import logging

import pytest

from symdoc import logger
from symdoc.tool_config import ToolConfig


class TestToolConfig:
    def test_is_singleton(self):
        assert ToolConfig() is ToolConfig()

    def test_file_overrides_defaults(self, temp_dir, monkeypatch):
        tools = temp_dir / "tools.json"
        tools.write_text(json.dumps({"swift": "/opt/swift/bin/swift", "demangle_timeout": 5}))
        monkeypatch.setenv("SYMDOC_TOOLS_JSON", str(tools))
        ToolConfig.reset()

        config = ToolConfig()
        assert config.source == tools
        assert config.swift_path == "/opt/swift/bin/swift"
        assert config.demangle_timeout == 5.0
        assert config.demangle_batch_size == 200

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            ToolConfig().get("compiler")


class TestLogger:
    def test_single_non_propagating_logger(self):
        log = logger.get_logger()
        assert log.name == "symdoc"
        assert log.propagate is False
        assert logger.get_logger() is log
        assert len(log.handlers) == 1

    def test_file_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("SYMDOC_LOG_LEVEL", "warning")
        assert logger.file_level() == logging.WARNING
        monkeypatch.setenv("SYMDOC_LOG_LEVEL", "loud")
        assert logger.file_level() == logging.DEBUG

    def test_console_echo_can_be_toggled(self):
        log = logger.get_logger()
        logger.enable_console(logging.DEBUG)
        logger.enable_console(logging.WARNING)
        try:
            assert len(log.handlers) == 2
        finally:
            logger.disable_console()
        assert len(log.handlers) == 1

    def test_rotation_keeps_newest_logs(self, temp_dir):
        for day in range(1, 9):
            (temp_dir / f"symdoc_2026010{day}_120000.log").write_text("old")
        (temp_dir / "symdoc.log").write_text("previous run")

        logger._rotate(temp_dir)

        rotated = sorted(p.name for p in temp_dir.glob("symdoc_*.log"))
        assert len(rotated) == logger.KEEP_ROTATED_LOGS
        assert "symdoc_20260101_120000.log" not in rotated
        assert not (temp_dir / "symdoc.log").exists()
