"""Simulation and validation configurations."""

import os
from dotenv import load_dotenv

load_dotenv()

SIMULATION_CONFIG = {
    # Per-step synthetic cost in milliseconds, upper bound exclusive
    "step_duration_min_ms": 1000,
    "step_duration_max_ms": 3000,
    # Artificial network latency (seconds) applied at the HTTP boundary only
    "automations_delay_range": (
        float(os.getenv("FLOWSIM_AUTOMATIONS_DELAY_MIN", "0.2")),
        float(os.getenv("FLOWSIM_AUTOMATIONS_DELAY_MAX", "0.5"))
    ),
    "simulate_delay_range": (
        float(os.getenv("FLOWSIM_SIMULATE_DELAY_MIN", "0.5")),
        float(os.getenv("FLOWSIM_SIMULATE_DELAY_MAX", "1.5"))
    ),
    "stream_step_interval": float(os.getenv("FLOWSIM_STREAM_STEP_INTERVAL", "0.1"))
}

VALIDATION_CONFIG = {
    "min_assignee_length": 2,
    "min_end_message_length": 5
}
