"""
API integration tests for /scheduler endpoints.

These use the test HTTP client from conftest.py, which talks to
the FastAPI app in-process. No server, no network.
"""

import asyncio

import pytest

THREE_JOBS = [
    {"name": "A", "p": 3, "d": 5},
    {"name": "B", "p": 2, "d": 3},
    {"name": "C", "p": 4, "d": 10},
]


@pytest.mark.asyncio
async def test_list_policies(client):
    response = await client.get("/scheduler/policies")
    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == ["edf", "wsrt", "lawler", "random"]


@pytest.mark.asyncio
async def test_schedule_edf(client):
    response = await client.post("/scheduler/schedule", json={
        "policy": "edf",
        "jobs": THREE_JOBS,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["policy"] == "edf"
    assert data["order"] == "B,A,C"
    assert data["cost"] == 1.0
    assert data["jobs"][0] == {"name": "B", "p": 2, "d": 3}


@pytest.mark.asyncio
async def test_schedule_lawler_single_job(client):
    response = await client.post("/scheduler/schedule", json={
        "policy": "lawler",
        "jobs": [{"name": "A", "p": 5, "d": 2}],
    })

    assert response.status_code == 200
    assert response.json()["cost"] == 2.0


@pytest.mark.asyncio
async def test_schedule_defaults_to_edf(client):
    response = await client.post("/scheduler/schedule", json={"jobs": THREE_JOBS})
    assert response.status_code == 200
    assert response.json()["policy"] == "edf"


@pytest.mark.asyncio
async def test_unknown_policy_falls_back_to_random(client):
    response = await client.post("/scheduler/schedule", json={
        "policy": "shortest-first",
        "jobs": THREE_JOBS,
        "seed": 3,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["policy"] == "random"
    assert sorted(data["order"].split(",")) == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_seeded_random_is_reproducible(client):
    body = {"policy": "random", "jobs": THREE_JOBS, "seed": 21}
    first = await client.post("/scheduler/schedule", json=body)
    second = await client.post("/scheduler/schedule", json=body)
    assert first.json()["order"] == second.json()["order"]


@pytest.mark.asyncio
async def test_empty_job_list_is_rejected(client):
    response = await client.post("/scheduler/schedule", json={"policy": "edf", "jobs": []})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_non_integer_processing_time_is_rejected(client):
    response = await client.post("/scheduler/schedule", json={
        "policy": "edf",
        "jobs": [{"name": "A", "p": "three", "d": 5}],
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_precondition_violation_returns_422(client):
    """Lawler refuses p = 0; the scheduler's message comes back as the detail."""
    response = await client.post("/scheduler/schedule", json={
        "policy": "lawler",
        "jobs": [{"name": "Z", "p": 0, "d": 1}],
    })

    assert response.status_code == 422
    assert "p > 0" in response.json()["detail"]


@pytest.mark.asyncio
async def test_compare_returns_one_result_per_policy(client):
    response = await client.post("/scheduler/compare", json={"jobs": THREE_JOBS, "seed": 1})

    assert response.status_code == 200
    data = response.json()
    assert [r["policy"] for r in data] == ["edf", "wsrt", "lawler", "random"]
    for result in data:
        assert sorted(result["order"].split(",")) == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_health_answers_while_compare_is_running(client):
    """
    /compare runs in the threadpool, so a /health request sent while it is
    busy finishes first instead of waiting for the whole comparison.
    """
    jobs = [{"name": f"J{i}", "p": (i % 7) + 1, "d": (i * 13) % 500} for i in range(3000)]
    finished = []

    async def compare():
        response = await client.post("/scheduler/compare", json={"jobs": jobs, "seed": 1})
        finished.append("compare")
        return response

    async def health():
        await asyncio.sleep(0.05)
        response = await client.get("/health")
        finished.append("health")
        return response

    compare_response, health_response = await asyncio.gather(compare(), health())

    assert health_response.status_code == 200
    assert compare_response.status_code == 200
    assert finished == ["health", "compare"]
