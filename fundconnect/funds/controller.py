"""
Fund Controller

Handles:
    - Orchestration between handler and service layer
"""

# Services
from .services.add_fund_service import AddFundService
from .services.list_fund_service import ListFundService
from .services.get_fund_service import GetFundService
from .services.edit_fund_service import EditFundService
from .services.delete_fund_service import DeleteFundService
from .services.fund_document_service import FundDocumentService

# Constants
from ..base import constants





class FundController:

    def create_fund(self, user: dict, args: dict) -> dict:
        """
        Create fund for the signed-in agent

        Args:
            user (dict): session payload (agent)
            args (dict): fund fields

        Returns:
            dict: API response
        """

        return AddFundService().create_fund(user["user_id"], args)



    def list_funds(self, user: dict, args: dict) -> dict:
        """
        List funds with optional search

        Agents passing mine=true only see funds they uploaded.
        """

        agent_id = None
        if args.get("mine") and user.get("role") == constants.ROLE_AGENT:
            agent_id = user["user_id"]

        return ListFundService().list_funds(search = args.get("search"), agent_id = agent_id)



    def get_fund(self, user: dict, fund_id: int) -> dict:
        return GetFundService().get_fund(fund_id, user)



    def edit_fund(self, args: dict) -> dict:
        """
        Edit fund fields

        Args:
            args (dict): {"fund_id": int, ...}

        Returns:
            dict
        """

        return EditFundService().edit_fund(args)



    def delete_fund(self, fund_id: int) -> dict:
        """
        Delete fund, its documents and interests

        Args:
            fund_id (int)

        Returns:
            dict
        """

        return DeleteFundService().delete_fund(fund_id)



    def upload_document(self, fund_id: int, args: dict) -> dict:
        return FundDocumentService().upload_document(fund_id, args)
