"""
File: Fund Routes

Handles:
    - Add Fund
    - List / Get Fund
    - Edit / Delete Fund
    - Upload Fund Document
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..funds.requests.fund_request import AddFundRequest, EditFundRequest, ListFundRequest
from ..funds.requests.upload_document_request import UploadDocumentRequest

# Validations
from ..funds.validations.fund_validation import FundValidation
from ..funds.validations.fund_document_validation import FundDocumentValidation

# Controller
from ..funds.controller import FundController

# Session
from ..auth.services.session_service import SessionService

# Constants
from ..base import constants

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("funds.handler")

# Namespaces
fund_namespace = Namespace('funds', description = 'Fund Management APIs')





@fund_namespace.route('/add')
class AddFund(Resource):

    @AddFundRequest.apply(fund_namespace)
    def post(self):
        """
        Create new Fund (agents only)
        """

        try:
            # Session
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            # Args
            args = AddFundRequest.get_data()

            # Validations
            FundValidation().validate_create(args)

            # Controller
            result = FundController().create_fund(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Add fund failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fund_namespace.route('/list')
class ListFunds(Resource):

    @ListFundRequest.apply(fund_namespace)
    def get(self):
        """
        Browse funds, newest first
        """

        try:
            user = SessionService.from_request().require_session()

            args = ListFundRequest.get_data()

            result = FundController().list_funds(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("List funds failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fund_namespace.route('/edit')
class EditFund(Resource):

    @EditFundRequest.apply(fund_namespace)
    def put(self):
        """
        Update fund fields (owning agent only)
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            args = EditFundRequest.get_data()

            FundValidation().validate_edit(args, user["user_id"])

            result = FundController().edit_fund(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Edit fund failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fund_namespace.route('/<int:fund_id>')
class FundDetail(Resource):

    def get(self, fund_id):
        """
        Fund detail with documents

        Investors also get has_expressed_interest.
        """

        try:
            user = SessionService.from_request().require_session()

            result = FundController().get_fund(user, fund_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Get fund failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, fund_id):
        """
        Delete fund, its documents and stored files (owning agent only)
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            FundValidation.validate_owner(fund_id, user["user_id"])

            result = FundController().delete_fund(fund_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Delete fund failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fund_namespace.route('/<int:fund_id>/documents')
class UploadFundDocument(Resource):

    @UploadDocumentRequest.apply(fund_namespace)
    def post(self, fund_id):
        """
        Upload a document for the fund (owning agent only)
        """

        try:
            user = SessionService.from_request().require_session(constants.ROLE_AGENT)

            args = UploadDocumentRequest.get_data()

            FundValidation.validate_owner(fund_id, user["user_id"])
            FundDocumentValidation().validate(args)

            result = FundController().upload_document(fund_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Upload fund document failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
