"""
Model: FundDocument
Table: fc_fund_documents

Files attached to a fund (deck, PPM, term sheet...). The file itself lives
in object storage; storage_path is the s3:// location.
"""

# Database
from ..config.database import db

# Helpers
from ..util.timeutil import utc_now





class FundDocument(db.Model):
    """ A document belonging to a fund... """

    # Table Name
    __tablename__ = "fc_fund_documents"

    doc_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    fund_id = db.Column(
        db.Integer,
        db.ForeignKey("fc_funds.fund_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    document_type = db.Column(
        db.String(50),
        nullable = False,
        doc = "One of: pitch_deck / ppm / term_sheet / track_record / other"
    )

    file_name = db.Column(db.String(255), nullable = False)

    storage_path = db.Column(db.String(500), nullable = False)

    public_url = db.Column(db.String(1000), nullable = True)

    uploaded_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now
    )

    # Relationship
    fund = db.relationship("Fund", back_populates = "documents")

    def __repr__(self):
        return f"<FundDocument {self.file_name}>"
