"""
Interest Requests

Handles:
    - Add Interest body       {fund_id}
    - Remove Interest query   ?confirm=true
    - Agent list query        ?fund_id=
"""

from flask_restx import fields
from flask import request





class AddInterestRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Add Interest
        """

        model = namespace.model("AddInterestRequest", {
            "fund_id": fields.Integer(
                required = True,
                description = "Fund the investor is interested in"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}



class RemoveInterestRequest:

    @staticmethod
    def apply(namespace):
        return namespace.param(
            'confirm',
            'Must be true to remove the interest',
            _in = 'query',
            type = 'boolean',
            required = True
        )


    @staticmethod
    def get_data():
        return {
            "confirm": request.args.get("confirm", "false").lower() in ("1", "true", "yes")
        }



class AgentInterestsRequest:

    @staticmethod
    def apply(namespace):
        return namespace.param(
            'fund_id',
            'Only interests on this fund',
            _in = 'query',
            type = 'integer',
            required = False
        )


    @staticmethod
    def get_data():
        return {
            "fund_id": request.args.get("fund_id")
        }
