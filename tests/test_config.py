"""
Unit Tests for Message Configuration
====================================
"""


class TestConfig:
    """Tests for environment-driven defaults."""

    def test_defaults(self, monkeypatch):
        from smsly_message.config import MessageConfig

        monkeypatch.delenv("SMSLY_AUTODETECT_ENCODING", raising=False)
        monkeypatch.delenv("SMSLY_CLIENT_REF_MAX_LENGTH", raising=False)
        monkeypatch.delenv("SMSLY_WAP_VALIDITY_MS", raising=False)

        config = MessageConfig()

        assert config.autodetect_encoding is False
        assert config.client_ref_max_length == 40
        assert config.wap_validity_ms == 172800000

    def test_environment(self, monkeypatch):
        from smsly_message.config import MessageConfig

        monkeypatch.setenv("SMSLY_AUTODETECT_ENCODING", "true")
        monkeypatch.setenv("SMSLY_CLIENT_REF_MAX_LENGTH", "20")

        config = MessageConfig()

        assert config.autodetect_encoding is True
        assert config.client_ref_max_length == 20

    def test_get_config_is_cached(self):
        from smsly_message.config import get_config

        assert get_config() is get_config()
