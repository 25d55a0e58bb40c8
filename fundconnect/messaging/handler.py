"""
File: Conversation Routes

Handles:
    - Resolve (find or create) investor ↔ agent conversation
    - Get Conversation
    - List / Send Messages
    - Mark Conversation Read
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..messaging.requests.conversation_request import (
    ResolveConversationRequest,
    SendMessageRequest,
    ListMessagesRequest
)

# Validations
from ..messaging.validations.conversation_validation import ConversationValidation

# Controller
from ..messaging.controller import ConversationController

# Session
from ..auth.services.session_service import SessionService

# Constants
from ..base import constants

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("messaging.handler")

# Namespaces
conversation_namespace = Namespace('conversations', description = 'Investor / Agent Messaging APIs')





@conversation_namespace.route('/resolve')
class ResolveConversation(Resource):

    @ResolveConversationRequest.apply(conversation_namespace)
    def post(self):
        """
        Find or create the conversation with an agent (investors only)
        """

        try:
            # Session
            user = SessionService.from_request().require_session(constants.ROLE_INVESTOR)

            # Args
            args = ResolveConversationRequest.get_data()

            # Validations
            ConversationValidation.validate_resolve(args)

            # Controller
            result = ConversationController().resolve(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Resolve conversation failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@conversation_namespace.route('/<string:conversation_id>')
class ConversationDetail(Resource):

    def get(self, conversation_id):
        """
        Conversation metadata (participants only)
        """

        try:
            user = SessionService.from_request().require_session()

            result = ConversationController().get_conversation(user, conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Get conversation failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@conversation_namespace.route('/<string:conversation_id>/messages')
class ConversationMessages(Resource):

    @ListMessagesRequest.apply(conversation_namespace)
    def get(self, conversation_id):
        """
        Messages of the conversation, oldest first
        """

        try:
            user = SessionService.from_request().require_session()

            args = ListMessagesRequest.get_data()
            ConversationValidation.validate_limit(args)

            result = ConversationController().list_messages(user, conversation_id, args["limit"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List messages failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @SendMessageRequest.apply(conversation_namespace)
    def post(self, conversation_id):
        """
        Send a message into the conversation
        """

        try:
            user = SessionService.from_request().require_session()

            args = SendMessageRequest.get_data()
            ConversationValidation.validate_message(args)

            result = ConversationController().send_message(user, conversation_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Send message failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@conversation_namespace.route('/<string:conversation_id>/read')
class MarkConversationRead(Resource):

    def post(self, conversation_id):
        """
        Move the caller's last-read mark to now
        """

        try:
            user = SessionService.from_request().require_session()

            result = ConversationController().mark_read(user, conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Mark read failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
