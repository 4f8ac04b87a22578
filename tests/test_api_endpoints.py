"""
API endpoint tests
"""
import json


def _parse_sse(text):
    events = []
    for line in text.splitlines():
        if line.startswith('data: '):
            events.append(json.loads(line[6:]))
    return events


class TestHealthAndCatalogue:
    """Health check and automation catalogue endpoints"""

    def test_health(self, api_client):
        response = api_client.get("/")

        assert response.status_code == 200
        assert "running" in response.json()["status"]

    def test_list_automations(self, api_client):
        response = api_client.get("/automations")

        assert response.status_code == 200
        automations = response.json()["automations"]
        assert len(automations) == 5
        assert automations[0]["id"] == "send_email"

    def test_get_automation(self, api_client):
        response = api_client.get("/automations/generate_doc")

        assert response.status_code == 200
        assert response.json()["params"] == ["template", "recipient", "format"]

    def test_unknown_automation_is_404(self, api_client):
        response = api_client.get("/automations/launch_rocket")

        assert response.status_code == 404


class TestValidateEndpoint:
    """POST /validate-workflow"""

    def test_valid_workflow(self, api_client, sample_workflow):
        response = api_client.post("/validate-workflow", json=sample_workflow)

        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is True
        assert body["errors"] == []
        assert body["warnings"] == []

    def test_invalid_workflow_reports_categories(self, api_client, sample_workflow):
        sample_workflow["nodes"] = [n for n in sample_workflow["nodes"] if n["type"] != "end"]
        sample_workflow["edges"] = [e for e in sample_workflow["edges"] if e["target"] != "end_1"]

        response = api_client.post("/validate-workflow", json=sample_workflow)

        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is False
        assert body["errors"][0] == {
            "node_id": None,
            "message": "Workflow must have at least one Exit node",
            "type": "structural"
        }

    def test_empty_workflow(self, api_client):
        response = api_client.post("/validate-workflow", json={"nodes": [], "edges": []})

        assert response.status_code == 200
        assert len(response.json()["errors"]) == 1

    def test_mismatched_payload_is_422(self, api_client, sample_workflow):
        sample_workflow["nodes"][1]["data"]["type"] = "approval"

        response = api_client.post("/validate-workflow", json=sample_workflow)

        assert response.status_code == 422


class TestSimulateEndpoint:
    """POST /simulate-workflow and its streaming variant"""

    def test_simulate_valid_workflow(self, api_client, sample_workflow):
        response = api_client.post("/simulate-workflow", json=sample_workflow)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [step["node_id"] for step in body["steps"]] == ["start_1", "task_1", "end_1"]
        assert [step["node_type"] for step in body["steps"]] == ["start", "task", "end"]
        assert body["steps"][-1]["details"] == "All done here"
        assert body["duration"] == sum(step["duration"] for step in body["steps"])

    def test_simulate_invalid_workflow(self, api_client, sample_workflow):
        sample_workflow["nodes"][1]["data"]["assignee"] = ""

        response = api_client.post("/simulate-workflow", json=sample_workflow)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["steps"] == []
        assert body["duration"] == 0
        assert body["errors"]

    def test_stream_emits_steps_in_order(self, api_client, sample_workflow):
        response = api_client.post("/simulate-workflow-stream", json=sample_workflow)

        assert response.status_code == 200
        events = _parse_sse(response.text)
        event_types = [event["type"] for event in events]

        assert event_types == ["start", "step", "step", "step", "complete"]
        assert [event["step"]["node_id"] for event in events if event["type"] == "step"] == [
            "start_1", "task_1", "end_1"
        ]
        step_total = sum(event["step"]["duration"] for event in events if event["type"] == "step")
        assert events[-1]["duration"] == step_total

    def test_stream_reports_validation_error(self, api_client):
        response = api_client.post("/simulate-workflow-stream", json={"nodes": [], "edges": []})

        events = _parse_sse(response.text)
        assert [event["type"] for event in events] == ["validation_error"]
        assert events[0]["errors"]
