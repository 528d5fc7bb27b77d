"""Tests for client configuration."""

from cr_openapi_client import Config, RuntimeOptions
from cr_openapi_client.core.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT


def test_defaults():
    config = Config()
    assert config.connect_timeout == DEFAULT_CONNECT_TIMEOUT == 5000
    assert config.read_timeout == DEFAULT_READ_TIMEOUT == 10000
    assert config.endpoint_map == {}
    assert config.access_key_id is None


def test_endpoint_map_not_shared():
    first = Config()
    first.endpoint_map["cn-hangzhou"] = "a.example.com"
    assert Config().endpoint_map == {}


def test_from_env(monkeypatch):
    monkeypatch.setenv("ALIBABA_CLOUD_ACCESS_KEY_ID", "env-id")
    monkeypatch.setenv("ALIBABA_CLOUD_ACCESS_KEY_SECRET", "env-secret")
    monkeypatch.setenv("ALIBABA_CLOUD_SECURITY_TOKEN", "env-token")
    monkeypatch.setenv("ALIBABA_CLOUD_REGION_ID", "cn-beijing")

    config = Config.from_env()

    assert config.access_key_id == "env-id"
    assert config.access_key_secret == "env-secret"
    assert config.security_token == "env-token"
    assert config.region_id == "cn-beijing"


def test_from_env_legacy_key_id(monkeypatch):
    monkeypatch.setenv("ALIBABA_CLOUD_ACCESS_KEY_Id", "legacy-id")
    assert Config.from_env().access_key_id == "legacy-id"


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("ALIBABA_CLOUD_REGION_ID", "cn-beijing")
    config = Config.from_env(region_id="cn-shanghai", read_timeout=3000)
    assert config.region_id == "cn-shanghai"
    assert config.read_timeout == 3000


def test_runtime_options_defaults():
    runtime = RuntimeOptions()
    assert runtime.read_timeout is None
    assert runtime.connect_timeout is None
    assert runtime.ignore_ssl is False
