#!/usr/bin/env python3
"""
FlowSim Server
Main entry point for the server application
"""

import uvicorn

from flowsim.api.api_server import app
from flowsim.config import API_CONFIG

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=API_CONFIG["host"],
        port=API_CONFIG["port"],
        reload=False
    )
