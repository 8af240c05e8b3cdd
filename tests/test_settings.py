"""Tests for settings: environment overrides."""

import logging

from settings import _env_bool, _env_number


class TestEnvNumber:
    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv('BANNER_COLORS_MAX_ATTEMPTS', raising=False)
        assert _env_number('BANNER_COLORS_MAX_ATTEMPTS', 15) == 15

    def test_valid_values_are_cast(self, monkeypatch):
        monkeypatch.setenv('BANNER_COLORS_MAX_ATTEMPTS', ' 40 ')
        monkeypatch.setenv('BANNER_COLORS_CACHE_TTL', '12.5')

        assert _env_number('BANNER_COLORS_MAX_ATTEMPTS', 15) == 40
        assert _env_number('BANNER_COLORS_CACHE_TTL', 300.0, float) == 12.5

    def test_malformed_value_falls_back_with_warning(self, monkeypatch, caplog):
        monkeypatch.setenv('BANNER_COLORS_MAX_ATTEMPTS', 'lots')
        monkeypatch.setenv('BANNER_COLORS_CACHE_TTL', '5m')

        with caplog.at_level(logging.WARNING, logger='settings'):
            assert _env_number('BANNER_COLORS_MAX_ATTEMPTS', 15) == 15
            assert _env_number('BANNER_COLORS_CACHE_TTL', 300.0, float) == 300.0

        assert 'BANNER_COLORS_MAX_ATTEMPTS' in caplog.text
        assert 'BANNER_COLORS_CACHE_TTL' in caplog.text


class TestEnvBool:
    def test_truthy_spellings(self, monkeypatch):
        for value in ('1', 'true', 'Yes', ' on '):
            monkeypatch.setenv('BANNER_COLORS_ANALYTICS', value)
            assert _env_bool('BANNER_COLORS_ANALYTICS')

    def test_anything_else_is_false(self, monkeypatch):
        monkeypatch.setenv('BANNER_COLORS_ANALYTICS', 'off')
        assert not _env_bool('BANNER_COLORS_ANALYTICS', default=True)

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv('BANNER_COLORS_ANALYTICS', raising=False)
        assert _env_bool('BANNER_COLORS_ANALYTICS', default=True)
        assert not _env_bool('BANNER_COLORS_ANALYTICS')
