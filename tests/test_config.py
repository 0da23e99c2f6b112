"""Tests for TurnwiseConfig."""

import pytest

from turnwise.config import TurnwiseConfig


class TestTurnwiseConfig:
    """Test configuration loading."""

    def test_defaults(self, config) -> None:
        """Defaults target DeepSeek-style reasoning backends."""
        assert config.reasoning_side_channel is True
        assert config.reasoning_field == "reasoning_content"

    def test_env_override(self, config, monkeypatch: pytest.MonkeyPatch) -> None:
        """TURNWISE_ environment variables override defaults."""
        monkeypatch.setenv("TURNWISE_REASONING_SIDE_CHANNEL", "false")
        monkeypatch.setenv("TURNWISE_REASONING_FIELD", "reasoning")

        loaded = TurnwiseConfig()

        assert loaded.reasoning_side_channel is False
        assert loaded.reasoning_field == "reasoning"

    def test_env_file(self, config, tmp_path) -> None:
        """Settings are read from .env in the working directory."""
        (tmp_path / ".env").write_text("TURNWISE_REASONING_SIDE_CHANNEL=0\nUNRELATED=1\n")

        loaded = TurnwiseConfig()

        assert loaded.reasoning_side_channel is False
