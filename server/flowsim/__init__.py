"""FlowSim - workflow graph validation and execution simulation."""

__version__ = "1.0.0"
