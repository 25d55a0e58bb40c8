"""
Invitation Request

Handles:
    - Swagger body model for Create Invitation API  {name, email}
"""

from flask_restx import fields
from flask import request





class CreateInvitationRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Create Invitation
        """

        model = namespace.model("CreateInvitationRequest", {
            "name": fields.String(
                required = True,
                description = "Investor name"
            ),
            "email": fields.String(
                required = True,
                description = "Investor email"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}
