"""
Get Fund Service

Handles:
    - Fund detail with documents
    - has_expressed_interest flag for investors
"""

# Database
from ...config.database import db

# Models
from ...models.fc_fund import Fund

# Services
from .list_fund_service import serialize_fund
from ...interests.services.interest_ledger import InterestLedger

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import format_datetime





class GetFundService:

    def __init__(self, session = None):
        self.session = session or db.session


    def get_fund(self, fund_id: int, user: dict) -> dict:
        fund = self.session.get(Fund, fund_id)

        if not fund:
            raise NotFoundException(messages.ERROR["FUND_NOT_FOUND"])

        data = serialize_fund(fund)
        data["documents"] = [
            {
                "doc_id": doc.doc_id,
                "document_type": doc.document_type,
                "file_name": doc.file_name,
                "public_url": doc.public_url,
                "uploaded_at": format_datetime(doc.uploaded_at)
            }
            for doc in sorted(fund.documents, key = lambda doc: doc.doc_id)
        ]

        if user.get("role") == constants.ROLE_INVESTOR:
            data["has_expressed_interest"] = InterestLedger(self.session).has_interest(
                user["user_id"], fund.fund_id
            )

        return data
