from __future__ import annotations

import pytest

from couch import APIError


def test_get_security(client, transport):
    transport.reply(
        200,
        {
            "admins": {"names": ["alice"], "roles": []},
            "members": {"names": [], "roles": ["staff"]},
        },
    )

    security = client.security().get_security("orders")

    assert security["admins"]["names"] == ["alice"]
    assert transport.last_path() == "/orders/_security"


def test_set_security_fills_missing_lists(client, transport):
    transport.reply(200, {"ok": True})

    client.security().set_security(
        "orders", {"admins": {"names": ["alice"]}, "members": {"roles": ["staff"]}}
    )

    assert transport.last.method == "PUT"
    assert transport.last_json() == {
        "admins": {"names": ["alice"], "roles": []},
        "members": {"names": [], "roles": ["staff"]},
    }


def test_set_security_forbidden(client, transport):
    transport.reply(
        403, {"error": "forbidden", "reason": "You are not a db or server admin."}
    )

    with pytest.raises(APIError, match="failed to set security: forbidden"):
        client.security().set_security(
            "orders",
            {"admins": {"names": [], "roles": []}, "members": {"names": [], "roles": []}},
        )
