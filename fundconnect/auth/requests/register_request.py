"""
Register Request

Handles:
    - Swagger body model for Register API
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class RegisterRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Register
        """

        model = namespace.model("RegisterRequest", {
            "email": fields.String(
                required = True,
                description = "Login email"
            ),
            "password": fields.String(
                required = True,
                description = "Password (min 8 characters)"
            ),
            "role": fields.String(
                required = True,
                enum = ["agent", "investor"],
                description = "Account role"
            ),
            "name": fields.String(
                required = True,
                description = "Display name"
            ),
            "firm": fields.String(
                required = False,
                description = "Placement firm (agents)"
            ),
            "invitation_code": fields.String(
                required = False,
                description = "Code from an inviting agent (investors)"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True) or {}
