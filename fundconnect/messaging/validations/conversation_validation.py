"""
Conversation Validation

Checks:
    - agent_id present (resolve)
    - message content present and within length (send)
    - list limit positive, capped at CONVERSATION_MESSAGES_LIMIT
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import InvalidAgentException, ValidationException


MESSAGE_MAX_LENGTH = 5000





class ConversationValidation:

    @staticmethod
    def validate_resolve(args: dict):
        agent_id = args.get("agent_id")

        if not agent_id or not str(agent_id).strip():
            raise InvalidAgentException(messages.ERROR["AGENT_ID_REQUIRED"])

        return True


    @staticmethod
    def validate_message(args: dict):
        content = args.get("content")

        if not content or not isinstance(content, str) or not content.strip():
            raise ValidationException(
                message = messages.ERROR["MESSAGE_CONTENT_REQUIRED"]
            )

        if len(content.strip()) > MESSAGE_MAX_LENGTH:
            raise ValidationException(
                message = messages.ERROR["MESSAGE_TOO_LONG"].format(MESSAGE_MAX_LENGTH)
            )

        return True


    @staticmethod
    def validate_limit(args: dict):
        limit = args.get("limit")

        if limit is None or limit < 1:
            raise ValidationException(
                message = "limit must be a positive integer"
            )

        args["limit"] = min(limit, constants.CONVERSATION_MESSAGES_LIMIT)

        return True
