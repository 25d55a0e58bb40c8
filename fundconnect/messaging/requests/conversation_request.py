"""
Conversation Requests

Handles:
    - Resolve Conversation body  {agent_id}
    - Send Message body          {content}
    - Message list query string  ?limit=
"""

from flask_restx import fields
from flask import request

# Constants
from ...base import constants





class ResolveConversationRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Resolve Conversation
        """

        model = namespace.model("ResolveConversationRequest", {
            "agent_id": fields.String(
                required = True,
                description = "Agent the investor wants to contact"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}



class SendMessageRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SendMessageRequest", {
            "content": fields.String(
                required = True,
                description = "Message text"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}



class ListMessagesRequest:

    @staticmethod
    def apply(namespace):
        return namespace.param(
            'limit',
            'Newest messages to return (oldest first)',
            _in = 'query',
            type = 'integer',
            default = constants.CONVERSATION_MESSAGES_LIMIT
        )


    @staticmethod
    def get_data():
        return {
            "limit": request.args.get("limit", default = constants.CONVERSATION_MESSAGES_LIMIT, type = int)
        }
