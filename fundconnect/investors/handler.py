"""
File: Investor Routes

Handles:
    - Investors I introduced (agent)
    - Investor profile with interests in my funds (agent)
    - Create / list invitation codes (agent)
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..investors.requests.invitation_request import CreateInvitationRequest

# Validations
from ..investors.validations.investor_validation import InvestorValidation

# Controller
from ..investors.controller import InvestorController

# Session
from ..auth.services.session_service import SessionService

# Constants
from ..base import constants

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("investors.handler")

# Namespaces
investor_namespace = Namespace('investors', description = 'Agent Investor Roster APIs')





@investor_namespace.route('/mine')
class MyInvestors(Resource):

    def get(self):
        """
        Investors introduced by the signed-in agent
        """

        try:
            # Session
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            # Controller
            result = InvestorController().my_investors(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List investors failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@investor_namespace.route('/invitations')
class Invitations(Resource):

    def get(self):
        """
        Invitation codes created by the signed-in agent
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            result = InvestorController().my_invitations(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List invitations failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @CreateInvitationRequest.apply(investor_namespace)
    def post(self):
        """
        Create an invitation code for a prospective investor
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            # Args
            args = CreateInvitationRequest.get_data()

            # Validations
            InvestorValidation.validate_invitation(args)

            result = InvestorController().create_invitation(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Create invitation failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@investor_namespace.route('/<string:investor_id>')
class InvestorDetail(Resource):

    def get(self, investor_id):
        """
        One investor's profile and their interests in your funds
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            result = InvestorController().investor_detail(user, investor_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Investor detail failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
