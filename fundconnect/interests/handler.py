"""
File: Interest Routes

Handles:
    - Express Interest in a Fund
    - Remove Interest (with confirmation)
    - My Interests (investor)
    - Interests on my Funds (agent)
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..interests.requests.interest_request import (
    AddInterestRequest,
    RemoveInterestRequest,
    AgentInterestsRequest
)

# Validations
from ..interests.validations.interest_validation import InterestValidation

# Controller
from ..interests.controller import InterestController

# Session
from ..auth.services.session_service import SessionService

# Constants
from ..base import constants

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("interests.handler")

# Namespaces
interest_namespace = Namespace('interests', description = 'Investor Interest APIs')





@interest_namespace.route('/add')
class AddInterest(Resource):

    @AddInterestRequest.apply(interest_namespace)
    def post(self):
        """
        Express interest in a fund (investors only)
        """

        try:
            # Session
            user = SessionService.from_request().require_session(constants.ROLE_INVESTOR)

            # Args
            args = AddInterestRequest.get_data()

            # Validations
            InterestValidation.validate_fund_id(args)

            # Controller
            result = InterestController().add_interest(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Add interest failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@interest_namespace.route('/<int:interest_id>')
class RemoveInterest(Resource):

    @RemoveInterestRequest.apply(interest_namespace)
    def delete(self, interest_id):
        """
        Remove one of your interests (?confirm=true)
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_INVESTOR)

            args = RemoveInterestRequest.get_data()

            result = InterestController().remove_interest(user, interest_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Remove interest failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@interest_namespace.route('/mine')
class MyInterests(Resource):

    def get(self):
        """
        The signed-in investor's interests, newest first
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_INVESTOR)

            result = InterestController().my_interests(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List investor interests failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@interest_namespace.route('/agent')
class AgentInterests(Resource):

    @AgentInterestsRequest.apply(interest_namespace)
    def get(self):
        """
        Interests on funds the signed-in agent uploaded
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            args = AgentInterestsRequest.get_data()
            InterestValidation.validate_fund_id(args, required = False)

            result = InterestController().agent_interests(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List agent interests failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
