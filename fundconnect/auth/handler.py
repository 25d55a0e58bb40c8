"""
File: Auth Routes

Handles:
    - Register
    - Sign In / Sign Out
    - Current Session
    - Resend Verification Email
    - Verify Email
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..auth.requests.register_request import RegisterRequest
from ..auth.requests.sign_in_request import SignInRequest
from ..auth.requests.verify_email_request import VerifyEmailRequest

# Validations
from ..auth.validations.auth_validation import AuthValidation

# Controller
from ..auth.controller import AuthController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException
from ..util.logger import get_logger

logger = get_logger("auth.handler")

# Namespaces
auth_namespace = Namespace('auth', description = 'Authentication APIs')





@auth_namespace.route('/register')
class Register(Resource):

    @RegisterRequest.apply(auth_namespace)
    def post(self):
        """
        Create an agent or investor account and sign in
        """

        try:
            # Args
            args = RegisterRequest.get_data()

            # Validations
            AuthValidation.validate_register(args)

            # Controller
            result = AuthController().register(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Register failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/sign-in')
class SignIn(Resource):

    @SignInRequest.apply(auth_namespace)
    def post(self):
        """
        Sign in with email and password
        """

        try:
            args = SignInRequest.get_data()

            AuthValidation.validate_sign_in(args)

            result = AuthController().sign_in(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Sign in failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/sign-out')
class SignOut(Resource):

    def post(self):
        """
        Clear the current session
        """

        try:
            result = AuthController().sign_out()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Sign out failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/session')
class CurrentSession(Resource):

    def get(self):
        """
        Current session payload (401 when signed out)
        """

        try:
            result = AuthController().current_session()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Session lookup failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/resend-verification')
class ResendVerification(Resource):

    @SignInRequest.apply_email_only(auth_namespace)
    def post(self):
        """
        Issue a new email verification token
        """

        try:
            args = SignInRequest.get_data()

            AuthValidation.validate_email(args)

            result = AuthController().resend_verification(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Resend verification failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/verify')
class VerifyEmail(Resource):

    @VerifyEmailRequest.apply(auth_namespace)
    def post(self):
        """
        Redeem the token from a verification email
        """

        try:
            args = VerifyEmailRequest.get_data()

            AuthValidation.validate_token(args)

            result = AuthController().verify_email(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("Verify email failed")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
