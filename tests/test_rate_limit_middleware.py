import placement_portal.main as main_mod
import placement_portal.routers.auth as auth_mod

from conftest import API


def test_auth_rate_limit_blocks_excess_requests(monkeypatch, anon_client):
    monkeypatch.setattr(main_mod.settings, "rate_limit_auth_per_min", 2)
    monkeypatch.setattr(auth_mod, "get_by_email", lambda db, email: None)

    payload = {"email": "x@example.com", "password": "bad"}
    r1 = anon_client.post(f"{API}/auth/login", json=payload)
    r2 = anon_client.post(f"{API}/auth/login", json=payload)
    r3 = anon_client.post(f"{API}/auth/login", json=payload)

    assert r1.status_code == 401
    assert r2.status_code == 401
    assert r3.status_code == 429
    assert int(r3.headers["Retry-After"]) >= 1
    assert r3.json()["code"] == "rate_limited"


def test_rate_limit_disabled_when_zero(monkeypatch, anon_client):
    monkeypatch.setattr(main_mod.settings, "rate_limit_auth_per_min", 0)
    monkeypatch.setattr(auth_mod, "get_by_email", lambda db, email: None)
    for _ in range(5):
        resp = anon_client.post(f"{API}/auth/login", json={"email": "x@example.com", "password": "bad"})
        assert resp.status_code == 401


def test_other_routes_are_not_limited(monkeypatch, client):
    monkeypatch.setattr(main_mod.settings, "rate_limit_auth_per_min", 1)
    for _ in range(3):
        assert client.get("/health/live").status_code == 200
