"""
Pytest configuration and fixtures
"""
import os
import sys
import random
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add server path for imports when the package is not installed
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'server'))

from flowsim.workflow import WorkflowSimulator  # noqa: E402
from builders import FIXED_START  # noqa: E402


@pytest.fixture
def fixed_simulator() -> WorkflowSimulator:
    """Simulator with a seeded random source and a frozen clock"""
    return WorkflowSimulator(rng=random.Random(1234), clock=lambda: FIXED_START)


@pytest.fixture
def api_client(monkeypatch) -> Generator[TestClient, None, None]:
    """In-process HTTP client with artificial latency disabled"""
    from flowsim.api import api_server

    monkeypatch.setitem(api_server.SIMULATION_CONFIG, "automations_delay_range", (0.0, 0.0))
    monkeypatch.setitem(api_server.SIMULATION_CONFIG, "simulate_delay_range", (0.0, 0.0))
    monkeypatch.setitem(api_server.SIMULATION_CONFIG, "stream_step_interval", 0.0)

    with TestClient(api_server.app) as client:
        yield client


@pytest.fixture
def sample_workflow():
    """Sample workflow fixture: Entry -> Task -> Exit"""
    return {
        "nodes": [
            {
                "id": "start_1",
                "type": "start",
                "position": {"x": 100, "y": 100},
                "data": {"type": "start", "title": "Start", "metadata": [{"key": "owner", "value": "hr"}]}
            },
            {
                "id": "task_1",
                "type": "task",
                "position": {"x": 300, "y": 100},
                "data": {"type": "task", "title": "Review", "assignee": "Jo"}
            },
            {
                "id": "end_1",
                "type": "end",
                "position": {"x": 500, "y": 100},
                "data": {"type": "end", "title": "Done", "end_message": "All done here"}
            }
        ],
        "edges": [
            {"id": "e1", "source": "start_1", "target": "task_1"},
            {"id": "e2", "source": "task_1", "target": "end_1"}
        ]
    }
