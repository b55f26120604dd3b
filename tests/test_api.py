"""Tests for the HTTP surface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from binpacker.api import app

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "strategies": ["ffd", "mffd", "next_fit"]}


def test_pack_mffd() -> None:
    request = {
        "capacity": 100,
        "strategy": "mffd",
        "items": [
            {"id": "a", "size": 70},
            {"id": "b", "size": 60},
            {"sku": "S", "size": 20, "quantity": 2},
        ],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["strategy"] == "mffd"
    assert data["bin_count"] == 2
    assert data["item_count"] == 4
    assert data["bins"][0]["item_ids"] == ["a"]
    # the smallest remaining small goes in first; equal sizes pop the later one
    assert data["bins"][1]["item_ids"] == ["b", "S_0001", "S_0000"]
    assert data["bins"][1]["remaining_space"] == 0


def test_pack_uses_default_strategy(monkeypatch) -> None:
    monkeypatch.setenv("BINPACKER_DEFAULT_STRATEGY", "next_fit")

    response = client.post("/pack", json={"capacity": 10, "items": []})

    assert response.status_code == 200
    data = response.json()
    assert data["strategy"] == "next_fit"
    assert data["bin_count"] == 1
    assert data["item_count"] == 0


def test_pack_oversized_item_returns_422() -> None:
    request = {"capacity": 50, "strategy": "ffd", "items": [{"id": "big", "size": 60}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "ITEM_TOO_BIG"
    assert data["detail"] == "Object too big! 60 can't fit in 50"
    assert data["item_size"] == 60
    assert data["capacity"] == 50


def test_pack_unknown_strategy_returns_422() -> None:
    request = {"capacity": 50, "strategy": "best_fit", "items": []}

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    assert response.json()["error"] == "UNKNOWN_STRATEGY"


def test_pack_invalid_capacity_is_rejected() -> None:
    response = client.post("/pack", json={"capacity": 0, "items": []})

    assert response.status_code == 422


def test_pack_too_many_items(monkeypatch) -> None:
    monkeypatch.setenv("BINPACKER_MAX_ITEMS", "3")
    request = {"capacity": 10, "items": [{"sku": "A", "size": 1, "quantity": 4}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 413


def test_pack_huge_quantity_rejected_before_expansion(monkeypatch) -> None:
    monkeypatch.setenv("BINPACKER_MAX_ITEMS", "3")
    request = {"capacity": 10, "items": [{"sku": "A", "size": 1, "quantity": 10**12}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 413
    assert response.json()["detail"] == f"{10**12} items exceeds the limit of 3"


def test_pack_records_normalised_strategy() -> None:
    request = {"capacity": 10, "strategy": " MFFD ", "items": [{"id": "a", "size": 4}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    assert response.json()["strategy"] == "mffd"
