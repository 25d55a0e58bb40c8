"""
List Fund Service

Handles:
    - Fetch all funds (investor browse)
    - Fetch the agent's own funds (mine=true)
    - Search by fund name / strategy
"""

# Database
from ...config.database import db

# Models
from ...models.fc_fund import Fund

# SQLAlchemy
from sqlalchemy import or_
from sqlalchemy.orm import joinedload

# Helpers
from ...util.timeutil import format_datetime


FUND_NUMBER_FIELDS = ("size", "minimum_investment", "track_record_irr", "track_record_moic")
FUND_TEXT_FIELDS = ("strategy", "sector_focus", "geography", "fee_structure")


def serialize_fund(fund: Fund) -> dict:
    """ Fund row → API dict (numbers as float, agent inlined)... """

    agent = fund.agent

    data = {
        "fund_id": fund.fund_id,
        "name": fund.name,
        "uploaded_by_agent_id": fund.uploaded_by_agent_id,
        "agent": {
            "agent_id": agent.agent_id,
            "name": agent.name,
            "firm": agent.firm
        } if agent else None,
        "created_at": format_datetime(fund.created_at),
        "updated_at": format_datetime(fund.updated_at)
    }

    for field in FUND_NUMBER_FIELDS:
        value = getattr(fund, field)
        data[field] = float(value) if value is not None else None

    for field in FUND_TEXT_FIELDS:
        data[field] = getattr(fund, field)

    return data





class ListFundService:

    def __init__(self, session = None):
        self.session = session or db.session


    def list_funds(self, search: str = None, agent_id: str = None) -> dict:
        """
        Fetch fund list with optional search

        Args:
            search (str): Name / strategy search keyword
            agent_id (str): Only funds uploaded by this agent

        Returns:
            dict
        """

        query = self.session.query(Fund).options(joinedload(Fund.agent))

        # 🔎 Apply Search Filter
        if search:
            query = query.filter(
                or_(
                    Fund.name.ilike(f"%{search}%"),
                    Fund.strategy.ilike(f"%{search}%")
                )
            )

        if agent_id:
            query = query.filter(Fund.uploaded_by_agent_id == agent_id)

        # Order latest first
        funds = query.order_by(Fund.created_at.desc(), Fund.fund_id.desc()).all()

        return {
            "total": len(funds),
            "funds": [serialize_fund(fund) for fund in funds]
        }
