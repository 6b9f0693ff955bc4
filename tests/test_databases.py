from __future__ import annotations

import pytest

from couch import APIError, DecodeError, NotFoundError, UnexpectedResponseError

DB_INFO = {
    "cluster": {"n": 3, "q": 2, "r": 2, "w": 2},
    "compact_running": False,
    "db_name": "orders",
    "disk_format_version": 8,
    "doc_count": 12,
    "doc_del_count": 1,
    "instance_start_time": "0",
    "purge_seq": "0-abc",
    "sizes": {"active": 100, "file": 2048, "external": 50},
    "update_seq": "13-xyz",
    "props": {},
}


def test_get_database(client, transport):
    transport.reply(200, DB_INFO)

    info = client.databases().get_database("orders")

    assert info["doc_count"] == 12
    assert info["cluster"]["q"] == 2
    assert transport.last.method == "GET"
    assert transport.last_path() == "/orders"


def test_get_database_escapes_name(client, transport):
    transport.reply(200, DB_INFO)

    client.databases().get_database("team/orders")

    assert transport.last_path() == "/team%2Forders"


def test_get_missing_database_is_not_found(client, transport):
    transport.reply(404, {"error": "not_found", "reason": "Database does not exist."})

    with pytest.raises(NotFoundError) as excinfo:
        client.databases().get_database("nope")

    assert excinfo.value.kind == "database"
    assert excinfo.value.name == "nope"
    assert str(excinfo.value) == "database not found: nope"


def test_get_database_server_error(client, transport):
    transport.reply(500, {"error": "unknown_error", "reason": "badarg"})

    with pytest.raises(APIError) as excinfo:
        client.databases().get_database("orders")

    assert excinfo.value.status == 500
    assert excinfo.value.error == "unknown_error"
    assert excinfo.value.reason == "badarg"


def test_get_database_with_unexpected_body(client, transport):
    transport.reply(200, "<html>proxy</html>")

    with pytest.raises(DecodeError) as excinfo:
        client.databases().get_database("orders")

    assert excinfo.value.body == "<html>proxy</html>"


def test_create_database_with_options(client, transport):
    transport.reply(201, {"ok": True})

    resp = client.databases().create_database(
        "orders", options={"q": 8, "n": 3, "partitioned": True}
    )

    assert resp == {"ok": True}
    assert transport.last.method == "PUT"
    assert transport.last_path() == "/orders"
    assert transport.last_query() == {"q": "8", "n": "3", "partitioned": "true"}


def test_create_database_omits_empty_options(client, transport):
    transport.reply(201, {"ok": True})

    client.databases().create_database("orders", options={"q": 0, "partitioned": False})

    assert transport.last.url.endswith("/orders")


def test_create_existing_database(client, transport):
    transport.reply(
        412,
        {"error": "file_exists", "reason": "The database could not be created."},
    )

    with pytest.raises(APIError) as excinfo:
        client.databases().create_database("orders")

    assert excinfo.value.status == 412
    assert excinfo.value.error == "file_exists"
    assert "file_exists - The database could not be created." in str(excinfo.value)


def test_create_database_with_undecodable_error(client, transport):
    transport.reply(502, "Bad Gateway")

    with pytest.raises(UnexpectedResponseError) as excinfo:
        client.databases().create_database("orders")

    assert excinfo.value.status == 502
    assert excinfo.value.body == "Bad Gateway"
    assert str(excinfo.value) == "request failed with status 502: Bad Gateway"


def test_delete_database(client, transport):
    transport.reply(200, {"ok": True})

    assert client.databases().delete_database("orders") == {"ok": True}
    assert transport.last.method == "DELETE"


@pytest.mark.parametrize("status, expected", [(200, True), (404, False)])
def test_database_exists(client, transport, status, expected):
    transport.reply(status)

    assert client.databases().database_exists("orders") is expected
    assert transport.last.method == "HEAD"


def test_database_exists_unexpected_status(client, transport):
    transport.reply(401)

    with pytest.raises(UnexpectedResponseError) as excinfo:
        client.databases().database_exists("orders")

    assert excinfo.value.status == 401


def test_bulk_insert_and_update_share_the_wire_format(client, transport):
    docs = [{"_id": "a", "_rev": "1-x", "_deleted": True}, {"_id": "b"}]
    result = [{"id": "a", "ok": True, "rev": "2-y"}, {"id": "b", "ok": True, "rev": "1-z"}]
    transport.reply(201, result)
    transport.reply(201, result)

    inserted = client.databases().bulk_insert("orders", docs)
    first = transport.last
    updated = client.databases().bulk_update("orders", docs)
    second = transport.last

    assert inserted == updated == result
    for req in (first, second):
        assert req.method == "POST"
        assert req.url == "http://couch.test:5984/orders/_bulk_docs"
    assert first.body == second.body
    assert transport.last_json() == {"docs": docs}


def test_bulk_insert_expects_a_list(client, transport):
    transport.reply(201, {"ok": True})

    with pytest.raises(DecodeError, match="expected list, got dict"):
        client.databases().bulk_insert("orders", [{}])


def test_find_omits_empty_members(client, transport):
    transport.reply(
        200,
        {"docs": [{"_id": "a"}], "bookmark": "g1", "warning": "no matching index"},
    )

    resp = client.databases().find(
        "orders",
        {"selector": {"status": "open"}, "limit": 10, "skip": 0, "fields": []},
    )

    assert resp["docs"] == [{"_id": "a"}]
    assert resp["warning"] == "no matching index"
    assert transport.last_path() == "/orders/_find"
    assert transport.last_json() == {"selector": {"status": "open"}, "limit": 10}


def test_all_docs_without_options(client, transport):
    transport.reply(200, {"total_rows": 0, "offset": 0, "rows": []})

    resp = client.databases().all_docs("orders")

    assert resp["rows"] == []
    assert transport.last.url == "http://couch.test:5984/orders/_all_docs"


def test_all_docs_json_encodes_string_keys(client, transport):
    transport.reply(200, {"total_rows": 0, "offset": 0, "rows": []})

    client.databases().all_docs(
        "orders",
        options={
            "key": "abc",
            "startkey": "a",
            "endkey": "b",
            "include_docs": True,
            "limit": 5,
            "descending": False,
        },
    )

    assert transport.last.method == "GET"
    assert transport.last_query() == {
        "key": '"abc"',
        "startkey": '"a"',
        "endkey": '"b"',
        "include_docs": "true",
        "limit": "5",
    }


def test_all_docs_with_keys_switches_to_post(client, transport):
    transport.reply(
        200,
        {
            "total_rows": 2,
            "offset": 0,
            "rows": [{"id": "a", "key": "a", "value": {"rev": "1-x"}}],
        },
    )

    resp = client.databases().all_docs(
        "orders", options={"keys": ["a", "b"], "include_docs": True, "key": "ignored"}
    )

    assert resp["rows"][0]["value"]["rev"] == "1-x"
    assert transport.last.method == "POST"
    assert transport.last_query() == {"include_docs": "true"}
    assert transport.last_json() == {"keys": ["a", "b"]}


def test_database_exists_api_error(client, transport):
    transport.reply(
        401, {"error": "unauthorized", "reason": "Name or password is incorrect."}
    )

    with pytest.raises(APIError) as excinfo:
        client.databases().database_exists("orders")

    assert excinfo.value.status == 401
    assert excinfo.value.error == "unauthorized"
