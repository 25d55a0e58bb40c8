"""
Conversation Controller

Handles:
    - Orchestration between handler and messaging services
"""

# Services
from .services.conversation_resolver import ConversationResolver
from .services.message_service import MessageService

# Constants
from ..base import constants





class ConversationController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.resolver = ConversationResolver()
        self.message_service = MessageService()



    def resolve(self, user: dict, args: dict) -> dict:
        """
        Find or create the conversation between the investor and an agent

        Args:
            user (dict): session payload (investor)
            args (dict): {"agent_id": str}

        Returns:
            dict: {"conversation_id": str}
        """

        conversation_id = self.resolver.resolve(
            investor_id = user["user_id"],
            agent_id = str(args["agent_id"]).strip()
        )

        return {"conversation_id": conversation_id}



    def get_conversation(self, user: dict, conversation_id: str) -> dict:
        conversation = self.message_service.get_conversation(
            conversation_id = conversation_id,
            user_id = user["user_id"],
            role = user["role"]
        )

        return self.message_service.serialize_conversation(conversation, user["role"])



    def list_messages(self, user: dict, conversation_id: str, limit: int = None) -> dict:
        rows = self.message_service.list_messages(
            conversation_id = conversation_id,
            user_id = user["user_id"],
            role = user["role"],
            limit = limit or constants.CONVERSATION_MESSAGES_LIMIT
        )

        return {
            "total": len(rows),
            "messages": rows
        }



    def send_message(self, user: dict, conversation_id: str, args: dict) -> dict:
        return self.message_service.send_message(
            conversation_id = conversation_id,
            user_id = user["user_id"],
            role = user["role"],
            content = args["content"]
        )



    def mark_read(self, user: dict, conversation_id: str) -> dict:
        return self.message_service.mark_read(
            conversation_id = conversation_id,
            user_id = user["user_id"],
            role = user["role"]
        )
