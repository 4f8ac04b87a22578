from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
import asyncio
import logging
import uuid

from ..workflow import WorkflowValidator, WorkflowSimulator
from ..services import AutomationCatalog
from ..utils import ErrorResponse, handle_api_errors, format_sse_data, random_delay
from ..config import API_CONFIG, SIMULATION_CONFIG
from ..models import (
    WorkflowDefinition,
    ValidationResult,
    SimulationResponse,
    AutomationAction,
    AutomationListResponse
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_CONFIG["title"],
    description="Validation and execution preview for flowchart workflows",
    version=API_CONFIG["version"]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=API_CONFIG["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global instances (stateless services only)
validator = WorkflowValidator()
simulator = WorkflowSimulator(validator=validator)
automation_catalog = AutomationCatalog()


@app.get("/")
async def health():
    return {"status": "Workflow simulation API is running", "version": API_CONFIG["version"]}


@app.get("/automations", response_model=AutomationListResponse)
@handle_api_errors(default_status=500)
async def list_automations():
    """List selectable automated actions"""
    await random_delay(SIMULATION_CONFIG["automations_delay_range"])
    return AutomationListResponse(automations=automation_catalog.list_actions())


@app.get("/automations/{action_id}", response_model=AutomationAction)
@handle_api_errors(default_status=500)
async def get_automation(action_id: str):
    """Look up a single automated action"""
    action = automation_catalog.get_action(action_id)
    if action is None:
        raise ErrorResponse.not_found(f"Automation '{action_id}'")
    return action


@app.post("/validate-workflow", response_model=ValidationResult)
@handle_api_errors(default_status=500)
async def validate_workflow(workflow: WorkflowDefinition):
    """Validate workflow structure, connections and node data"""
    return validator.validate_workflow(workflow)


@app.post("/simulate-workflow", response_model=SimulationResponse)
@handle_api_errors(default_status=500)
async def simulate_workflow(workflow: WorkflowDefinition):
    """
    Simulate workflow execution

    The artificial delay models network latency of the surrounding system;
    the simulation itself is computed synchronously.
    """
    await random_delay(SIMULATION_CONFIG["simulate_delay_range"])
    result = simulator.simulate(workflow)
    logger.info(f"Simulation finished: success={result.success}, steps={len(result.steps)}")
    return result


@app.post("/simulate-workflow-stream")
async def simulate_workflow_stream(workflow: WorkflowDefinition):
    """
    Simulate workflow execution (streaming)

    Emits steps one by one in execution order as Server-Sent Events.
    """
    simulation_id = str(uuid.uuid4())

    async def generate_stream():
        try:
            logger.info(f"Starting streaming simulation {simulation_id} with {len(workflow.nodes)} nodes")

            result = simulator.simulate(workflow)
            if not result.success:
                yield format_sse_data({
                    'type': 'validation_error',
                    'simulation_id': simulation_id,
                    'message': 'Workflow validation failed',
                    'errors': result.errors
                })
                return

            yield format_sse_data({
                'type': 'start',
                'simulation_id': simulation_id,
                'total_steps': len(result.steps)
            })

            interval = SIMULATION_CONFIG["stream_step_interval"]
            for index, step in enumerate(result.steps):
                if interval > 0:
                    await asyncio.sleep(interval)
                yield format_sse_data({
                    'type': 'step',
                    'index': index,
                    'step': step.model_dump(mode="json")
                })

            yield format_sse_data({
                'type': 'complete',
                'simulation_id': simulation_id,
                'success': True,
                'duration': result.duration
            })

        except Exception as e:
            logger.error(f"Streaming simulation {simulation_id} failed: {e}")
            yield format_sse_data({'type': 'error', 'message': str(e)})

    return StreamingResponse(
        generate_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive"
        }
    )
