"""
Service: ConversationResolver

Finds or creates the single conversation between an investor and an agent.

Design:
  - resolve() is idempotent: safe to call every time an investor opens
    "contact agent".
  - The (investor_id, agent_id) unique constraint closes the read-then-write
    race. When a concurrent resolve inserts first, our insert fails with
    IntegrityError; we roll back and return the row that won.
  - If legacy duplicates exist, the earliest-created row is returned.
"""

# Python Packages
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_agent import Agent
from ...models.fc_conversation import Conversation

# Exceptions
from ...util.exceptions import InvalidAgentException, TransientBackendException

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import utc_now
from ...util.logger import get_logger

logger = get_logger("messaging.resolver")





class ConversationResolver:

    def __init__(self, session = None):
        self.session = session or db.session


    def resolve(self, investor_id: str, agent_id: str) -> str:
        """
        Return the conversation id for the pair, creating it if needed.

        Args:
            investor_id: Current investor (already authenticated by caller)
            agent_id:    Agent the investor wants to contact

        Returns:
            str: conversation_id

        Raises:
            InvalidAgentException: agent_id empty or not an agent
            TransientBackendException: any other persistence failure
        """

        if not agent_id:
            raise InvalidAgentException(messages.ERROR["AGENT_ID_REQUIRED"])

        try:
            agent = self.session.get(Agent, agent_id)

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['CONVERSATION_CHECK_FAILED']}: {error}",
                details = str(error)
            )

        if not agent:
            raise InvalidAgentException(messages.ERROR["AGENT_NOT_FOUND"])

        existing = self._find(investor_id, agent_id)
        if existing:
            return existing.conversation_id

        return self._create(investor_id, agent_id)


    def _find(self, investor_id: str, agent_id: str):
        """ Earliest conversation for the exact pair, or None... """

        try:
            return (
                self.session.query(Conversation)
                .filter(
                    Conversation.investor_id == investor_id,
                    Conversation.agent_id == agent_id
                )
                .order_by(Conversation.created_at.asc())
                .first()
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['CONVERSATION_CHECK_FAILED']}: {error}",
                details = str(error)
            )


    def _create(self, investor_id: str, agent_id: str) -> str:
        conversation = Conversation(
            investor_id = investor_id,
            agent_id = agent_id,
            created_at = utc_now()
        )

        try:
            self.session.add(conversation)
            self.session.commit()

        except IntegrityError:
            # Another resolve for the same pair committed first
            self.session.rollback()
            winner = self._find(investor_id, agent_id)
            if winner:
                logger.info("Conversation race lost, reusing %s", winner.conversation_id)
                return winner.conversation_id

            raise TransientBackendException(
                message = messages.ERROR["CONVERSATION_CREATE_FAILED"]
            )

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"{messages.ERROR['CONVERSATION_CREATE_FAILED']}: {error}",
                details = str(error)
            )

        logger.info("New conversation created: %s", conversation.conversation_id)
        return conversation.conversation_id
