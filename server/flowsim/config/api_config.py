"""HTTP server configuration."""

import os
from dotenv import load_dotenv

load_dotenv()

API_CONFIG = {
    "host": os.getenv("FLOWSIM_HOST", "0.0.0.0"),
    "port": int(os.getenv("FLOWSIM_PORT", "5001")),
    "cors_origins": os.getenv("FLOWSIM_CORS_ORIGINS", "*").split(","),
    "title": "Workflow Simulation API",
    "version": "1.0.0"
}
