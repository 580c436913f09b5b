"""Tests for environment-driven configuration."""

import pytest

from holdings_charts import config


class TestEnvFlag:
    @pytest.mark.parametrize("value", ["1", "true", "Yes", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("HOLDINGS_CHARTS_TEST_FLAG", value)

        assert config._env_flag("HOLDINGS_CHARTS_TEST_FLAG") is True

    def test_falsy(self, monkeypatch):
        monkeypatch.setenv("HOLDINGS_CHARTS_TEST_FLAG", "off")

        assert config._env_flag("HOLDINGS_CHARTS_TEST_FLAG", default=True) is False

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("HOLDINGS_CHARTS_TEST_FLAG", raising=False)

        assert config._env_flag("HOLDINGS_CHARTS_TEST_FLAG", default=True) is True


def test_default_transaction_colors():
    colors = config.DEFAULT_TRANSACTION_COLORS

    assert colors.version == "2020-06"
    assert colors.color_for("Buy") == colors.colors["buy"]
    assert colors.color_for("journal") is None
