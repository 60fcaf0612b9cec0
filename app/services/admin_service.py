"""
Admin service for common admin functionality
"""

import logging
from typing import Dict, Any, List, Optional

from ..models.admin_action import AdminAction, ActionType

logger = logging.getLogger(__name__)


class AdminService:
    """Service class for common admin operations"""

    @staticmethod
    async def log_admin_action(
        admin_id: str,
        action_type: ActionType,
        target_collection: str,
        target_id: str,
        changes: Dict[str, Any],
        target_title: Optional[str] = None,
        changed_fields: Optional[List[str]] = None,
    ) -> None:
        """
        Centralized admin action logging

        Args:
            admin_id: ID of the admin performing the action
            action_type: Type of action being performed
            target_collection: Collection being modified
            target_id: ID of the target record
            changes: Dictionary of changes made
            target_title: Title of the test at the time of the action
            changed_fields: Top-level test fields written by the action
        """
        admin_action = AdminAction(
            admin_id=admin_id,
            action_type=action_type,
            target_collection=target_collection,
            target_id=target_id,
            target_title=target_title,
            changed_fields=sorted(changed_fields or []),
            changes=changes,
        )
        await admin_action.insert()
        logger.info(
            f"{action_type.value} on {target_collection}/{target_id} by {admin_id}"
        )

    @staticmethod
    def format_response(
        message: str,
        data: Optional[Any] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """
        Centralized response formatting

        Args:
            message: Response message
            data: Response data
            **kwargs: Additional response fields

        Returns:
            Formatted response dictionary
        """
        response = {"success": True, "message": message}

        if data is not None:
            response["data"] = data

        response.update(kwargs)
        return response
