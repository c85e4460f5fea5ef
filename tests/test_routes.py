"""HTTP tests using Flask's test client."""

from __future__ import annotations

import io


def _json(response):
    payload = response.get_json()
    assert payload is not None
    return payload


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert _json(response)["data"] == {"status": "ok", "tenants": 0}


def test_pages_render(client):
    for path in ("/", "/prizes", "/participants", "/lottery"):
        assert client.get(path).status_code == 200


def test_tenant_routes_create_default_session(client, app_service):
    client.get("/")

    assert app_service.store.tenant_ids() == ["user-127.0.0.1-127.0.0.1"]


def test_set_tenant_cookie_scopes_session(client, app_service):
    response = client.post("/set-tenant", data={"tenantName": "alice"})
    assert response.status_code == 302

    client.post("/api/participants", json={"id": "1", "name": "Alice"})

    assert [p.id for p in app_service.get_participants("alice-127.0.0.1")] == ["1"]
    assert app_service.get_participants("user-127.0.0.1-127.0.0.1") == []


def test_clear_tenant_removes_session_and_cookie(client, app_service):
    client.post("/set-tenant", data={"tenantName": "alice"})
    client.post("/api/prizes", json={"name": "Grand", "item": "TV", "quantity": 1})
    assert "alice-127.0.0.1" in app_service.store

    response = client.get("/clear-tenant")

    assert response.status_code == 302
    assert "alice-127.0.0.1" not in app_service.store
    assert "lottery_tenant_name=;" in response.headers.get("Set-Cookie", "")


def test_clients_on_different_ips_are_isolated(app, app_service):
    first = app.test_client()
    second = app.test_client()

    first.post("/api/prizes", json={"name": "Grand", "item": "TV", "quantity": 1})
    listed = second.get("/api/prizes", environ_base={"REMOTE_ADDR": "10.0.0.2"})

    assert _json(listed)["data"] == []
    assert len(app_service.store) == 2


def test_api_prize_crud_and_validation(client):
    created = client.post(
        "/api/prizes",
        json={"name": "Special", "item": "Phone", "quantity": 2, "drawFromAll": True},
    )
    assert created.status_code == 201
    assert _json(created)["data"] == {
        "name": "Special",
        "item": "Phone",
        "quantity": 2,
        "drawFromAll": True,
    }

    bad = client.post("/api/prizes", json={"name": "Neg", "quantity": -1})
    assert bad.status_code == 400
    assert _json(bad)["error"]["code"] == "validation_error"

    listed = client.get("/api/prizes")
    assert [p["name"] for p in _json(listed)["data"]] == ["Special"]


def test_api_participant_duplicate_is_not_an_error(client):
    first = client.post("/api/participants", json={"id": "1", "name": "Alice"})
    again = client.post("/api/participants", json={"id": "1", "name": "Other"})

    assert first.status_code == 201
    assert again.status_code == 200
    assert _json(again)["data"]["added"] is False
    assert _json(client.get("/api/participants"))["data"] == [{"id": "1", "name": "Alice"}]


def test_api_draw_success_and_errors(client):
    client.post("/api/prizes", json={"name": "Grand", "item": "TV", "quantity": 1})
    client.post("/api/participants", json={"id": "1", "name": "Alice"})

    drawn = client.post("/api/draw", json={"prizeName": "Grand"})
    assert drawn.status_code == 200
    data = _json(drawn)["data"]
    assert data["result"] == {
        "prizeName": "Grand",
        "prizeItem": "TV",
        "winnerId": "1",
        "winnerName": "Alice",
    }
    assert data["prizes"][0]["quantity"] == 0

    exhausted = client.post("/api/draw", json={"prizeName": "Grand"})
    assert exhausted.status_code == 409
    assert _json(exhausted)["error"]["code"] == "prize_exhausted"

    missing = client.post("/api/draw", json={"prizeName": "Ghost"})
    assert missing.status_code == 404
    assert _json(missing)["error"]["code"] == "prize_not_found"

    assert len(_json(client.get("/api/results"))["data"]) == 1


def test_form_draw_renders_error_message(client):
    client.post("/prizes", data={"prizeName": "Grand", "itemName": "TV", "quantity": "1", "drawFromAll": "false"})

    response = client.post("/draw", data={"prizeName": "Grand"})

    assert response.status_code == 200
    assert b"No eligible participants" in response.data


def test_form_draw_requires_prize(client):
    assert client.post("/draw", data={}).status_code == 400


def test_form_prize_with_bad_quantity(client):
    response = client.post("/prizes", data={"prizeName": "Grand", "itemName": "TV", "quantity": "lots"})

    assert response.status_code == 400


def test_form_flow_and_csv_round_trip(client):
    response = client.post(
        "/upload-participants-csv",
        data={"participantCSV": (io.BytesIO(b"1,Alice\n2,Bob\n"), "people.csv")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    assert b"Alice" in response.data and b"Bob" in response.data

    response = client.post(
        "/upload-prizes-csv",
        data={"prizeCSV": (io.BytesIO(b"Grand,TV,1,false\n"), "prizes.csv")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    assert b"Grand" in response.data

    drawn = client.post("/draw", data={"prizeName": "Grand"})
    assert drawn.status_code == 200
    assert b"TV" in drawn.data

    exported = client.get("/export-results-csv")
    assert exported.status_code == 200
    assert exported.mimetype == "text/csv"
    assert "lottery_results.csv" in exported.headers["Content-Disposition"]
    lines = exported.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Prize Name,Participant ID,Participant Name,Prize Item"
    assert len(lines) == 2
    assert lines[1].startswith("Grand,")


def test_upload_without_file(client):
    response = client.post("/upload-prizes-csv", data={}, content_type="multipart/form-data")

    assert response.status_code == 400


def test_form_participant_requires_both_fields(client):
    response = client.post("/participants", data={"participantID": "1", "participantName": ""})

    assert response.status_code == 400


def test_prize_list_partial(client):
    client.post("/api/prizes", json={"name": "Grand", "item": "TV", "quantity": 4})

    response = client.get("/prizes/list")

    assert response.status_code == 200
    assert b"Grand" in response.data and b"4" in response.data


def test_delete_session_api(client, app_service):
    client.post("/api/prizes", json={"name": "Grand", "item": "TV", "quantity": 1})

    response = client.delete("/api/session")

    assert _json(response)["data"]["cleared"] is True
    assert len(app_service.store) == 0


def test_unknown_route_uses_envelope(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert _json(response)["error"]["code"] == "not_found"


def test_forwarded_client_ip_behind_proxy():
    from dataclasses import dataclass

    from prizedraw import create_app
    from prizedraw.config import TestingConfig

    @dataclass(frozen=True)
    class ProxiedConfig(TestingConfig):
        PROXY_FIX_HOPS: int = 1

    app = create_app(ProxiedConfig)
    app.test_client().get("/", headers={"X-Forwarded-For": "203.0.113.7"})

    assert app.extensions["lottery_service"].store.tenant_ids() == ["user-203.0.113.7-203.0.113.7"]
