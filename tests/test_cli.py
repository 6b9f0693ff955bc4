from __future__ import annotations

import pytest
from click.testing import CliRunner

import couch_cli
from couch import Client, NotFoundError


@pytest.fixture
def cli(monkeypatch, session):
    monkeypatch.setattr(
        couch_cli,
        "Client",
        lambda url, timeout=None: Client(url, session=session, timeout=timeout),
    )
    runner = CliRunner()
    return lambda *args: runner.invoke(
        couch_cli.main, ["--url", "http://couch.test:5984", *args]
    )


def test_db_get_prints_info(cli, transport):
    transport.reply(200, {"db_name": "orders", "doc_count": 3})

    result = cli("db", "get", "orders")

    assert result.exit_code == 0, result.output
    assert '"doc_count": 3' in result.output
    assert transport.last.headers["Authorization"].startswith("Basic ")


def test_jwt_option_selects_bearer_auth(cli, transport):
    transport.reply(200, {"uuids": ["u1"]})

    result = cli("--jwt", "tok", "server", "uuids")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "u1"
    assert transport.last.headers["Authorization"] == "Bearer tok"
    assert transport.last_query() == {"count": "1"}


def test_session_cookie_option(cli, transport):
    transport.reply(200, {"ok": True, "info": {"authentication_handlers": []}, "userCtx": {"name": "john", "roles": []}})

    result = cli("--session-cookie", "abc123", "session", "info")

    assert result.exit_code == 0, result.output
    assert transport.last.headers["Cookie"] == "AuthSession=abc123"
    assert "Authorization" not in transport.last.headers


def test_session_login_prints_cookie(cli, transport):
    transport.reply(
        200, {"ok": True, "name": "john", "roles": []}, cookies={"AuthSession": "abc123"}
    )

    result = cli("session", "login", "john", "secret")

    assert result.exit_code == 0, result.output
    assert "AuthSession=abc123" in result.output


def test_config_set_reports_old_value(cli, transport):
    transport.reply(200, '"3"')

    result = cli("config", "--node", "node1", "set", "x", "y", "5")

    assert result.exit_code == 0, result.output
    assert "'3' -> '5'" in result.output
    assert transport.last_path() == "/_node/node1/_config/x/y"
    assert transport.last.body == b'"5"'


def test_view_query_parses_json_keys(cli, transport):
    transport.reply(200, {"rows": []})

    result = cli("view", "query", "orders", "reports", "by_day", "--key", "[2024, 1]", "--no-reduce")

    assert result.exit_code == 0, result.output
    assert transport.last_query() == {"key": "[2024, 1]", "reduce": "false"}


def test_db_exists_exit_code(cli, transport):
    transport.reply(404)

    result = cli("db", "exists", "orders")

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_errors_surface_from_commands(cli, transport):
    transport.reply(404, "")

    result = cli("doc", "get", "orders", "missing")

    assert isinstance(result.exception, NotFoundError)


def test_invalid_json_body(cli, transport):
    result = cli("doc", "create", "orders", "{not json")

    assert result.exit_code == 2
    assert transport.sent == []


@pytest.mark.parametrize("body", ["[]", '"x"', "5"])
def test_security_set_requires_an_object(cli, transport, body):
    result = cli("security", "set", "orders", body)

    assert result.exit_code == 2
    assert "body must be a JSON object" in result.output
    assert transport.sent == []
