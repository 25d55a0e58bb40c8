"""
Auth Controller

Handles:
    - Orchestration between handler and SessionService
"""

# Services
from .services.session_service import SessionService

# App Messages
from ..util import messages





class AuthController:

    def __init__(self, session_service: SessionService = None):
        self.session_service = session_service or SessionService.from_request()



    def register(self, args: dict) -> dict:
        return self.session_service.register(args)



    def sign_in(self, args: dict) -> dict:
        """
        Args:
            args (dict): {"email": str, "password": str}

        Returns:
            dict: session payload
        """

        return self.session_service.sign_in(args["email"], args["password"])



    def sign_out(self) -> dict:
        self.session_service.sign_out()
        return {"message": messages.SUCCESS["SIGN_OUT_SUCCESS"]}



    def current_session(self) -> dict:
        return self.session_service.require_session()



    def resend_verification(self, args: dict) -> dict:
        return self.session_service.resend_verification(args["email"])



    def verify_email(self, args: dict) -> dict:
        return self.session_service.verify_email(args["token"].strip())
