"""
Verify Email Request

Handles:
    - Swagger body model for Verify Email API  {token}
"""

from flask_restx import fields
from flask import request





class VerifyEmailRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("VerifyEmailRequest", {
            "token": fields.String(required = True, description = "Token from the verification link")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
