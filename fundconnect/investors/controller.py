"""
Investor Controller

Handles:
    - Orchestration between handler and the roster / invitation services
"""

# Services
from .services.investor_roster_service import InvestorRosterService
from .services.invitation_service import InvitationService





class InvestorController:

    def __init__(self):
        self.roster = InvestorRosterService()
        self.invitations = InvitationService()



    def my_investors(self, user: dict) -> dict:
        investors = self.roster.list_for_agent(user["user_id"])

        return {
            "total": len(investors),
            "investors": investors
        }



    def investor_detail(self, user: dict, investor_id: str) -> dict:
        return self.roster.get_for_agent(user["user_id"], investor_id)



    def create_invitation(self, user: dict, args: dict) -> dict:
        """
        Args:
            user (dict): session payload (agent)
            args (dict): {"name": str, "email": str}
        """

        return self.invitations.create_invitation(
            agent_id = user["user_id"],
            investor_name = args["name"],
            investor_email = args["email"]
        )



    def my_invitations(self, user: dict) -> dict:
        invitations = self.invitations.list_for_agent(user["user_id"])

        return {
            "total": len(invitations),
            "invitations": invitations
        }
