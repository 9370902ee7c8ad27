"""Tests for core/config.py — environment loading and soft validation."""
from dataclasses import FrozenInstanceError

import pytest

from core.config import WHMCSConfig, load_config


FULL_ENV = {
    "WHMCS_URL": "https://billing.example.com",
    "WHMCS_IDENTIFIER": "id",
    "WHMCS_SECRET": "s3cret",
    "WHMCS_ACCESS_KEY": "key",
}


class TestLoadConfig:
    def test_reads_all_four_settings(self):
        config = load_config(FULL_ENV)
        assert config.url == "https://billing.example.com"
        assert config.identifier == "id"
        assert config.secret == "s3cret"
        assert config.accesskey == "key"
        assert config.missing_settings() == []

    def test_missing_settings_default_to_empty(self):
        config = load_config({"WHMCS_URL": "https://billing.example.com"})
        assert config.secret == ""
        assert config.missing_settings() == ["WHMCS_IDENTIFIER", "WHMCS_SECRET", "WHMCS_ACCESS_KEY"]

    def test_empty_value_counts_as_missing(self):
        env = dict(FULL_ENV, WHMCS_SECRET="")
        assert load_config(env).missing_settings() == ["WHMCS_SECRET"]

    def test_defaults_to_process_environment(self, monkeypatch):
        for name, value in FULL_ENV.items():
            monkeypatch.setenv(name, value)
        assert load_config() == load_config(FULL_ENV)


class TestWHMCSConfig:
    def test_is_immutable(self):
        config = load_config(FULL_ENV)
        with pytest.raises(FrozenInstanceError):
            config.secret = "other"

    def test_repr_hides_credentials(self):
        text = repr(load_config(FULL_ENV))
        assert "s3cret" not in text
        assert "accesskey" not in text
        assert "billing.example.com" in text

    def test_empty_config_reports_everything(self):
        assert len(WHMCSConfig().missing_settings()) == 4
