import logging

from helius_mcp.config import (
    HeliusConfig,
    _load_rate_limit,
    _load_timeout,
    _parse_tool_rate_limits,
    build_rpc_url,
    default_config,
    is_test_mode,
    load_api_key,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("HELIUS_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 10.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("HELIUS_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_rate_limit_fallback(monkeypatch):
    monkeypatch.setenv("HELIUS_MCP_RATE_LIMIT_QPS", "fast")
    assert _load_rate_limit() == 10.0
    monkeypatch.setenv("HELIUS_MCP_RATE_LIMIT_QPS", "2")
    assert _load_rate_limit() == 2.0


def test_load_api_key_env_over_file(monkeypatch, tmp_path):
    monkeypatch.setenv("HELIUS_API_KEY", "env-key")
    monkeypatch.setenv("HELIUS_API_KEY_FILE", str(tmp_path / "apikey.txt"))
    assert load_api_key() == "env-key"


def test_load_api_key_from_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.delenv("HELIUS_API_KEY", raising=False)
    monkeypatch.setenv("HELIUS_API_KEY_FILE", str(key_file))
    assert load_api_key() == "file-key"


def test_load_api_key_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("HELIUS_API_KEY", raising=False)
    monkeypatch.setenv("HELIUS_API_KEY_FILE", str(tmp_path / "absent.txt"))
    assert load_api_key() is None


def test_is_test_mode_values(monkeypatch):
    for value in ("true", "1", "YES", "y"):
        monkeypatch.setenv("TEST_MODE", value)
        assert is_test_mode() is True
    for value in ("false", "0", ""):
        monkeypatch.setenv("TEST_MODE", value)
        assert is_test_mode() is False


def test_parse_tool_rate_limits_skips_malformed():
    raw = "helius_get_balance=2, helius_get_slot=abc, =3, junk, helius_search_assets=0.5"
    assert _parse_tool_rate_limits(raw) == {"helius_get_balance": 2.0, "helius_search_assets": 0.5}
    assert _parse_tool_rate_limits(None) == {}


def test_build_rpc_url():
    assert build_rpc_url("mainnet", "abc") == "https://mainnet.helius-rpc.com/?api-key=abc"
    assert build_rpc_url("devnet", None) == "https://devnet.helius-rpc.com/"


def test_endpoint_prefers_override():
    cfg = HeliusConfig(api_key="k", network="devnet", rpc_url="http://127.0.0.1:8899")
    assert cfg.endpoint == "http://127.0.0.1:8899"
    cfg = HeliusConfig(api_key="k", network="devnet", rpc_url=None)
    assert cfg.endpoint == "https://devnet.helius-rpc.com/?api-key=k"


def test_default_config_runs_in_test_mode_for_suite():
    assert default_config.test_mode is True


def test_logging_level_config():
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )
