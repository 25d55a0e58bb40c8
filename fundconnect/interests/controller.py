"""
Interest Controller

Handles:
    - Orchestration between handler and InterestLedger
"""

# Services
from .services.interest_ledger import InterestLedger





class InterestController:

    def __init__(self):
        self.ledger = InterestLedger()



    def add_interest(self, user: dict, args: dict) -> dict:
        """
        Args:
            user (dict): session payload (investor)
            args (dict): {"fund_id": int}
        """

        return self.ledger.add_interest(
            investor_id = user["user_id"],
            fund_id = args["fund_id"]
        )



    def remove_interest(self, user: dict, interest_id: int, args: dict) -> dict:
        return self.ledger.remove_interest(
            interest_id = interest_id,
            investor_id = user["user_id"],
            confirmed = args["confirm"]
        )



    def my_interests(self, user: dict) -> dict:
        interests = self.ledger.list_for_investor(user["user_id"])

        return {
            "total": len(interests),
            "interests": interests
        }



    def agent_interests(self, user: dict, args: dict) -> dict:
        interests = self.ledger.list_for_agent(user["user_id"], args.get("fund_id"))

        return {
            "total": len(interests),
            "interests": interests
        }
