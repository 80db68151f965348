"""Tests for the FastAPI backend."""

import asyncio
import threading

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from backend.app_factory import AppContext, create_app
from backend.models import MAX_STEP_FRAMES
from backend.simulation_runner import SimulationRunner
from rps.config.simulation_config import SimulationConfig


@pytest.fixture
def client():
    config = SimulationConfig.for_arena(800, 600, count_per_kind=4)
    context = AppContext(config=config, seed=7, start_paused=True)
    app = create_app(production_mode=False, context=context)
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["running"] is True


def test_state_lists_every_agent(client):
    response = client.get("/api/state")
    assert response.status_code == 200
    state = response.json()
    assert state["paused"] is True
    assert state["counts"] == {"rock": 4, "paper": 4, "scissors": 4}
    assert len(state["agents"]) == 12
    assert state["arena"] == {"width": 800, "height": 600, "agent_size": 52}
    kinds = {agent["kind"] for agent in state["agents"]}
    assert kinds == {"rock", "paper", "scissors"}


def test_stats(client):
    response = client.get("/api/stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["total_population"] == 12
    assert stats["frame_count"] == 0


def test_step_advances_frames_and_stays_paused(client):
    response = client.post("/api/control/step", json={"frames": 5})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["frame"] == 5
    assert body["paused"] is True

    stats = client.get("/api/stats").json()
    assert stats["decision_count"] >= 1
    assert stats["total_population"] == 12


def test_pause_and_resume(client):
    body = client.post("/api/control/resume").json()
    assert body["paused"] is False
    body = client.post("/api/control/pause").json()
    assert body["paused"] is True


def test_reset_respawns(client):
    client.post("/api/control/step", json={"frames": 3})
    body = client.post("/api/control/reset").json()
    assert body["success"] is True
    assert body["frame"] == 0
    state = client.get("/api/state").json()
    assert len(state["agents"]) == 12


def test_unknown_command(client):
    response = client.post("/api/control/explode")
    assert response.status_code == 404
    assert "pause" in response.json()["commands"]


@pytest.mark.parametrize(
    "body",
    [
        {"frames": 1, "dt": -1},
        {"frames": "many"},
        {"frames": MAX_STEP_FRAMES + 1},
        {"frames": 0},
    ],
)
def test_step_rejects_invalid_body(client, body):
    response = client.post("/api/control/step", json=body)
    assert response.status_code == 422
    assert client.get("/api/stats").json()["frame_count"] == 0


def test_step_with_explicit_dt(client):
    body = client.post("/api/control/step", json={"frames": 2, "dt": 0.05}).json()
    assert body["frame"] == 2
    state = client.get("/api/state").json()
    assert state["elapsed"] == pytest.approx(0.1)


def test_runner_rejects_invalid_step_directly():
    runner = SimulationRunner(SimulationConfig.for_arena(800, 600, count_per_kind=2), seed=1)
    with pytest.raises(ValidationError):
        runner.handle_command("step", {"dt": -0.5})
    assert runner.engine.frame_count == 0


def test_async_wrappers_run_off_the_event_loop():
    runner = SimulationRunner(SimulationConfig.for_arena(800, 600, count_per_kind=2), seed=1)
    caller = threading.get_ident()
    seen = []
    original = runner.get_stats

    def recording_get_stats():
        seen.append(threading.get_ident())
        return original()

    runner.get_stats = recording_get_stats
    stats = asyncio.run(runner.get_stats_async())
    response = asyncio.run(runner.handle_command_async("step", {"frames": 3}))

    assert stats.total_population == 6
    assert response.frame == 3
    assert seen and seen[0] != caller
