"""
HTTP tests for the FastAPI application, backed by a fresh store per test.
"""

import inspect

from aqstore import main


def _body(**overrides):
    body = {
        "location": "Lakeview District",
        "air_quality_index": 42,
        "pollutant_levels": {"PM2.5": 35.0},
        "weather": {"temperature": 20.0, "humidity": 55.0, "wind_speed": 4.0},
        "health_recommendations": ["Limit outdoor exercise"],
        "timestamp": 100,
    }
    body.update(overrides)
    return body


def test_health_reports_record_count(client):
    client.post("/air_quality", json=_body())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "records": 1}


def test_health_runs_in_threadpool():
    # store access blocks on a threading lock
    assert not inspect.iscoroutinefunction(main.health)


def test_add_and_get(client):
    response = client.post("/air_quality", json=_body())
    assert response.status_code == 201
    record = response.json()
    assert record["id"] == 0
    assert record["timestamp"] == 100

    response = client.get(f"/air_quality/{record['id']}")
    assert response.status_code == 200
    assert response.json() == record


def test_add_with_defaults(client):
    response = client.post("/air_quality", json={"location": "Old Town", "air_quality_index": 10})
    assert response.status_code == 201
    record = response.json()
    assert record["pollutant_levels"] == {}
    assert record["health_recommendations"] == []
    assert record["weather"] == {"temperature": 0.0, "humidity": 0.0, "wind_speed": 0.0}
    assert isinstance(record["timestamp"], int)


def test_add_missing_required_field_is_rejected(client):
    response = client.post("/air_quality", json={"air_quality_index": 10})
    assert response.status_code == 422


def test_get_missing_record_returns_404(client):
    response = client.get("/air_quality/5")
    assert response.status_code == 404
    assert response.json() == {"detail": "air quality data with id=5 not found"}


def test_update(client):
    record = client.post("/air_quality", json=_body()).json()
    response = client.put(f"/air_quality/{record['id']}", json=_body(location="Harbour", pollutant_levels={"O3": 1.0}))
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == record["id"]
    assert updated["location"] == "Harbour"
    assert updated["pollutant_levels"] == {"O3": 1.0}


def test_update_missing_record_returns_404(client):
    response = client.put("/air_quality/3", json=_body())
    assert response.status_code == 404
    assert client.get("/air_quality").json() == []


def test_delete(client):
    record = client.post("/air_quality", json=_body()).json()
    response = client.delete(f"/air_quality/{record['id']}")
    assert response.status_code == 204
    assert client.get(f"/air_quality/{record['id']}").status_code == 404
    assert client.delete(f"/air_quality/{record['id']}").status_code == 404


def test_list_all(client):
    for location in ("A", "B", "C"):
        client.post("/air_quality", json=_body(location=location))
    response = client.get("/air_quality")
    assert response.status_code == 200
    assert [record["location"] for record in response.json()] == ["A", "B", "C"]


def test_query_by_pollutant_level(client):
    client.post("/air_quality", json=_body(pollutant_levels={"PM2.5": 35.0}))
    client.post("/air_quality", json=_body(pollutant_levels={"PM2.5": 10.0}))

    response = client.get("/air_quality/pollutant", params={"pollutant": "PM2.5", "min_level": 30})
    assert response.status_code == 200
    assert [record["pollutant_levels"]["PM2.5"] for record in response.json()] == [35.0]

    response = client.get("/air_quality/pollutant", params={"pollutant": "CO2", "min_level": 0})
    assert response.json() == []


def test_query_by_timestamp_range(client):
    first = client.post("/air_quality", json=_body(timestamp=100)).json()
    client.post("/air_quality", json=_body(timestamp=200))

    response = client.get("/air_quality/timestamp_range", params={"start": 100, "end": 150})
    assert response.json() == [first]

    response = client.get("/air_quality/timestamp_range", params={"start": 200, "end": 100})
    assert response.status_code == 200
    assert response.json() == []


def test_query_by_weather(client):
    client.post("/air_quality", json=_body(weather={"temperature": 5.0, "humidity": 80.0, "wind_speed": 12.0}))
    warm = client.post("/air_quality", json=_body(weather={"temperature": 25.0, "humidity": 40.0, "wind_speed": 2.0})).json()

    response = client.get("/air_quality/weather", params={"min_temperature": 20, "max_wind_speed": 5})
    assert response.status_code == 200
    assert response.json() == [warm]


def test_search_by_location(client):
    lake = client.post("/air_quality", json=_body(location="Lakeview District")).json()
    client.post("/air_quality", json=_body(location="Old Town"))

    response = client.get("/air_quality/search", params={"location": "lake"})
    assert response.json() == [lake]


def test_search_with_empty_location_returns_all(client):
    client.post("/air_quality", json=_body(location="Lakeview District"))
    client.post("/air_quality", json=_body(location="Old Town"))

    response = client.get("/air_quality/search", params={"location": ""})
    assert response.status_code == 200
    assert [record["location"] for record in response.json()] == ["Lakeview District", "Old Town"]
