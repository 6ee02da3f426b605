"""Unit tests for server configuration."""
import pytest

from rpcdispatch.config import ServerConfig
from rpcdispatch.jsonrpc.dispatcher import JSONRPCServer
from rpcdispatch.jsonrpc.repository import DuplicatePolicy
from rpcdispatch.utils.errors import ConfigurationError


def test_defaults(monkeypatch):
    for name in ("DUPLICATE_POLICY", "MAX_WORKERS", "EXPOSE_INTERNAL_ERRORS", "LOG_LEVEL"):
        monkeypatch.delenv(f"RPCDISPATCH_{name}", raising=False)

    config = ServerConfig.from_env()

    assert config.duplicate_policy is DuplicatePolicy.OVERWRITE
    assert config.max_workers is None
    assert config.expose_internal_errors is False
    assert config.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("RPCDISPATCH_DUPLICATE_POLICY", "reject")
    monkeypatch.setenv("RPCDISPATCH_MAX_WORKERS", "4")
    monkeypatch.setenv("RPCDISPATCH_EXPOSE_INTERNAL_ERRORS", "true")
    monkeypatch.setenv("RPCDISPATCH_LOG_LEVEL", "debug")

    config = ServerConfig.from_env()

    assert config.duplicate_policy is DuplicatePolicy.REJECT
    assert config.max_workers == 4
    assert config.expose_internal_errors is True
    assert config.log_level == "DEBUG"


def test_invalid_env_value(monkeypatch):
    monkeypatch.setenv("RPCDISPATCH_DUPLICATE_POLICY", "ignore")
    with pytest.raises(ConfigurationError):
        ServerConfig.from_env()


def test_invalid_log_level():
    with pytest.raises(ConfigurationError):
        ServerConfig.from_mapping({"log_level": "chatty"})


def test_from_yaml(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("duplicate_policy: reject\nmax_workers: 2\n")

    config = ServerConfig.from_yaml(path)

    assert config.duplicate_policy is DuplicatePolicy.REJECT
    assert config.max_workers == 2


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert ServerConfig.from_yaml(path) == ServerConfig()


def test_from_yaml_requires_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        ServerConfig.from_yaml(path)


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        ServerConfig.from_yaml(tmp_path / "missing.yaml")


def test_server_from_config():
    config = ServerConfig(duplicate_policy="reject", expose_internal_errors=True)

    server = JSONRPCServer.from_config(config)

    assert server.request_json_handler_repository.duplicate_policy is DuplicatePolicy.REJECT
    assert server.expose_internal_errors is True
