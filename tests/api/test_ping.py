"""Tests for the ping endpoints."""

import arrow
import pytest


def test_ping_returns_pong(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"ping": "pong"}


def test_ping_date_uses_service_clock(client, fixed_ping_service):
    response = client.get("/ping/date")
    assert response.status_code == 200
    assert response.json() == {"ping": "pong", "date": "2025-03-23T21:41:10+00:00"}


def test_ping_date_with_timezone(client, fixed_ping_service):
    response = client.get("/ping/date", params={"tz": "Europe/Berlin"})
    assert response.status_code == 200
    assert response.json()["date"] == "2025-03-23T22:41:10+01:00"


def test_ping_date_live_clock(client):
    response = client.get("/ping/date")
    body = response.json()
    assert set(body) == {"ping", "date"}
    assert body["ping"] == "pong"
    assert arrow.get(body["date"]) <= arrow.utcnow()


def test_ping_date_unknown_timezone_is_bad_request(client):
    response = client.get("/ping/date", params={"tz": "Mars/Olympus_Mons"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Unknown time zone: Mars/Olympus_Mons"}


@pytest.mark.parametrize("tz", ["/etc/passwd", "../../etc/passwd", "a\x00b", "X" * 5000])
def test_ping_date_malformed_timezone_is_bad_request(client, tz):
    response = client.get("/ping/date", params={"tz": tz})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("Unknown time zone")
