"""Read-only collaborator services."""

from .automation_catalog import AutomationCatalog

__all__ = ['AutomationCatalog']
