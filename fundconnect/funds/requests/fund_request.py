"""
Fund Request Definitions

Handles:
    - Add / Edit Fund JSON bodies
    - Fund list query string (?search=, ?mine=true)
"""

from flask_restx import fields
from flask import request


def _fund_fields(require_name: bool):
    return {
        "name": fields.String(required = require_name, description = "Fund Name"),
        "size": fields.Float(description = "Target fund size (USD)"),
        "minimum_investment": fields.Float(description = "Minimum commitment (USD)"),
        "strategy": fields.String(description = "e.g. Buyout, Venture, Credit"),
        "sector_focus": fields.String(description = "Sector focus"),
        "geography": fields.String(description = "Geographic focus"),
        "track_record_irr": fields.Float(description = "Net IRR (%)"),
        "track_record_moic": fields.Float(description = "MOIC"),
        "fee_structure": fields.String(description = "e.g. 2/20")
    }





class AddFundRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Add Fund
        """

        model = namespace.model("AddFundRequest", _fund_fields(require_name = True))
        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True) or {}



class EditFundRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Edit Fund
        """

        model = namespace.model("EditFundRequest", {
            "fund_id": fields.Integer(
                required = True,
                description = "Fund ID to update"
            ),
            **_fund_fields(require_name = False)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True) or {}



class ListFundRequest:

    @staticmethod
    def apply(namespace):
        def decorator(func):
            func = namespace.param('search', 'Fund name / strategy search', _in = 'query')(func)
            func = namespace.param('mine', 'Agents: only my funds', _in = 'query', type = 'boolean')(func)
            return func

        return decorator


    @staticmethod
    def get_data():
        return {
            "search": request.args.get("search"),
            "mine": request.args.get("mine", "false").lower() in ("1", "true", "yes")
        }
