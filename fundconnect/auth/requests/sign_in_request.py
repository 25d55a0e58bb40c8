"""
Sign In Request

Also used by resend-verification, which only reads the email.
"""

from flask_restx import fields
from flask import request





class SignInRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SignInRequest", {
            "email": fields.String(required = True, description = "Login email"),
            "password": fields.String(required = True, description = "Password")
        })

        return namespace.expect(model)


    @staticmethod
    def apply_email_only(namespace):
        model = namespace.model("ResendVerificationRequest", {
            "email": fields.String(required = True, description = "Account email")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
