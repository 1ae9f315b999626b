"""Tests for the HTTP API."""

import pytest

HOUSE = {
    "house_width": 12,
    "house_length": 10,
    "floors": 2,
    "format": "ordinary",
    "language": "en",
}


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_compute_explication(client):
    response = client.post("/api/v1/plans/explication", json=HOUSE)

    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "ordinary"
    assert data["total_area"] == pytest.approx(240)
    assert [f["floor_number"] for f in data["floors"]] == [1, 2]
    for floor in data["floors"]:
        assert sum(r["area"] for r in floor["rooms"]) == pytest.approx(120, abs=0.11)
        assert "Staircase" in [r["name"] for r in floor["rooms"]]


def test_compute_explication_with_label_overrides(client):
    response = client.post(
        "/api/v1/plans/explication",
        json=dict(HOUSE, room_labels={"kids": "Kids room"})
    )

    assert response.status_code == 200
    names = [r["name"] for r in response.json()["floors"][1]["rooms"]]
    assert "Kids room" in names


def test_default_language_used_when_omitted(client):
    body = {k: v for k, v in HOUSE.items() if k != "language"}
    response = client.post("/api/v1/plans/explication", json=body)

    assert response.status_code == 200
    from planner import config
    from planner.services.room_labels import get_room_labels
    halls = get_room_labels(config.DEFAULT_LANGUAGE)["halls"]
    assert halls in [r["name"] for r in response.json()["floors"][0]["rooms"]]


def test_unsupported_language_is_bad_request(client):
    response = client.post("/api/v1/plans/explication", json=dict(HOUSE, language="de"))

    assert response.status_code == 400
    assert response.json()["error"] == "UnsupportedLanguageError"


@pytest.mark.parametrize("override", [
    {"house_width": 2},
    {"house_length": 0},
    {"floors": 0},
    {"format": "deluxe"},
])
def test_invalid_house_rejected(client, override):
    response = client.post("/api/v1/plans/explication", json=dict(HOUSE, **override))

    assert response.status_code == 422
    assert response.json()["message"].startswith("Validation error")


def test_compute_single_floor(client):
    response = client.post("/api/v1/plans/floor", json={
        "floor_area": 60,
        "floor_index": 2,
        "floor_count": 2,
        "language": "en",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["floor_number"] == 2
    assert data["total_area"] == pytest.approx(60, abs=0.11)
    names = [r["name"] for r in data["rooms"]]
    assert "Laundry" in names
    assert "Staircase" in names


def test_floor_index_outside_house_rejected(client):
    response = client.post("/api/v1/plans/floor", json={
        "floor_area": 60,
        "floor_index": 3,
        "floor_count": 2,
    })

    assert response.status_code == 422


def test_export_text(client):
    response = client.post(
        "/api/v1/plans/explication/text",
        json=dict(HOUSE, project={"name": "PH-202610-1234"})
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "PROJECT_ID: PH-202610-1234" in response.text
    assert "FLOOR_2:" in response.text


def test_export_pdf(client):
    response = client.post(
        "/api/v1/plans/explication/pdf",
        json=dict(HOUSE, project={"name": "Дом 1"})
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "filename=1.pdf" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


def test_get_labels(client):
    response = client.get("/api/v1/plans/labels/kk")

    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "kk"
    assert data["labels"]["stairs"] == "Баспалдақ"


def test_get_labels_unknown_language(client):
    response = client.get("/api/v1/plans/labels/xx")

    assert response.status_code == 400


def test_estimate(client):
    response = client.post("/api/v1/plans/estimate", json=dict(
        HOUSE,
        plot_width=30,
        plot_length=40,
        site_objects=[{"kind": "pool", "width": 8, "depth": 4}, {"kind": "garage", "cars": 1}]
    ))

    assert response.status_code == 200
    data = response.json()
    assert data["total_area"] == pytest.approx(240)
    assert data["architecture_price"] == pytest.approx(1200000)
    assert data["landscape_price"] == pytest.approx(1200000)
    assert [obj["cost"] for obj in data["objects"]] == [64000, 58500]
    assert data["grand_total"] == pytest.approx(1200000 + 1200000 + 64000 + 58500)


def test_estimate_tier_follows_floor_count(client):
    response = client.post("/api/v1/plans/estimate", json=dict(HOUSE, floors=3))

    assert response.status_code == 200
    assert response.json()["architecture_price"] == pytest.approx(2250000)
    assert response.json()["landscape_price"] == 0


@pytest.mark.parametrize("override", [
    {"plot_width": 30},
    {"site_objects": [{"kind": "terrace", "width": 4}]},
    {"site_objects": [{"kind": "garage", "cars": 4}]},
    {"site_objects": [{"kind": "helipad", "width": 4, "depth": 4}]},
])
def test_invalid_site_rejected(client, override):
    response = client.post("/api/v1/plans/estimate", json=dict(HOUSE, **override))

    assert response.status_code == 422


def test_export_text_includes_site(client):
    response = client.post("/api/v1/plans/explication/text", json=dict(
        HOUSE,
        plot_width=20,
        plot_length=25,
        site_objects=[{"kind": "custom", "width": 3, "depth": 2, "label": "Shed"}],
        project={"planning_wishes": "Two-car garage later"}
    ))

    assert response.status_code == 200
    assert "PLOT_AREA_SOTKA: 5.00" in response.text
    assert "- Shed: 3x2m" in response.text
    assert "PLANNING: Two-car garage later" in response.text
