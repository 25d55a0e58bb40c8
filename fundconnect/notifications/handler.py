"""
File: Notification Routes

Handles:
    - Unread Summary
    - Open Conversation (mark read + messages)
    - Live Unread Stream (text/event-stream)
"""

# Flask Packages
from flask import Response, stream_with_context
from flask_restx import Namespace, Resource

# Request
from ..notifications.requests.stream_request import StreamRequest

# Controller
from ..notifications.controller import NotificationController

# Session
from ..auth.services.session_service import SessionService

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("notifications.handler")

# Namespaces
notification_namespace = Namespace('notifications', description = 'Unread Message Notification APIs')





@notification_namespace.route('/unread')
class UnreadSummary(Resource):

    def get(self):
        """
        Total and per conversation unread counts

        Conversations ordered by unread count, then newest message.
        """

        try:
            user = SessionService.from_request().require_session()

            result = NotificationController().unread_summary(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Unread summary failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@notification_namespace.route('/open/<string:conversation_id>')
class OpenConversation(Resource):

    def post(self, conversation_id):
        """
        Open a conversation from the notification list

        The last-read mark is committed before the conversation is returned.
        """

        try:
            user = SessionService.from_request().require_session()

            result = NotificationController().open_conversation(user, conversation_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Open conversation failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@notification_namespace.route('/stream')
class UnreadStream(Resource):

    @StreamRequest.apply(notification_namespace)
    def get(self):
        """
        Server-sent events: an "unread" event with the summary after every change
        """

        try:
            user = SessionService.from_request().require_session()

        except AppException as error:
            return error.to_dict(), error.status_code

        args = StreamRequest.get_data()

        return Response(
            stream_with_context(NotificationController().stream(user, once = args["once"])),
            mimetype = "text/event-stream",
            headers = {
                "Cache-Control": "no-cache",
                "X-Accel-Buffering": "no"
            }
        )
