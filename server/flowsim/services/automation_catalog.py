"""Catalogue of automated actions selectable on Automated nodes."""

import logging
from typing import List, Optional

from ..models import AutomationAction

logger = logging.getLogger(__name__)


DEFAULT_AUTOMATIONS: List[AutomationAction] = [
    AutomationAction(
        id="send_email",
        label="Send Email",
        description="Send an email notification",
        params=["to", "subject", "body"]
    ),
    AutomationAction(
        id="generate_doc",
        label="Generate Document",
        description="Generate PDF or Word document",
        params=["template", "recipient", "format"]
    ),
    AutomationAction(
        id="create_ticket",
        label="Create Support Ticket",
        description="Create ticket in support system",
        params=["system", "priority", "description"]
    ),
    AutomationAction(
        id="update_database",
        label="Update Database Record",
        description="Update employee database",
        params=["table", "field", "value"]
    ),
    AutomationAction(
        id="send_slack_message",
        label="Send Slack Message",
        description="Post message to Slack channel",
        params=["channel", "message"]
    ),
]


class AutomationCatalog:
    """
    Read-only automation catalogue

    The editor uses it to fill Automated node payloads; validation and
    simulation only see the resulting action_id/action_label/parameters.
    """

    def __init__(self, actions: Optional[List[AutomationAction]] = None):
        self._actions = list(actions if actions is not None else DEFAULT_AUTOMATIONS)

    def list_actions(self) -> List[AutomationAction]:
        """Return copies so callers cannot alter the catalogue"""
        return [action.model_copy(deep=True) for action in self._actions]

    def get_action(self, action_id: str) -> Optional[AutomationAction]:
        for action in self._actions:
            if action.id == action_id:
                return action.model_copy(deep=True)
        logger.debug(f"Automation '{action_id}' not found in catalogue")
        return None
