import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool
from werkzeug.security import generate_password_hash

from fundconnect.app import create_app
from fundconnect.config.database import db
from fundconnect.models import Agent, Conversation, Fund, Investor, Message, User
from fundconnect.notifications.services.message_events import get_message_events
from fundconnect.auth.services.session_service import SESSION_KEY


TEST_PASSWORD = "password123"
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "SQLALCHEMY_ENGINE_OPTIONS": {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        },
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    return db.session


@pytest.fixture()
def events(app):
    return get_message_events()


# ── Seed helpers ─────────────────────────────────────────────────

def _user(session, role, email=None):
    user = User(
        user_id=str(uuid.uuid4()),
        email=email or f"{uuid.uuid4().hex[:8]}@example.com",
        password_hash=generate_password_hash(TEST_PASSWORD),
        role=role,
    )
    session.add(user)
    session.flush()
    return user


@pytest.fixture()
def make_agent(db_session):
    def _make(name="Bob", firm="Harbor Placement", email=None):
        user = _user(db_session, "agent", email)
        agent = Agent(agent_id=user.user_id, name=name, firm=firm)
        db_session.add(agent)
        db_session.commit()
        return agent
    return _make


@pytest.fixture()
def make_investor(db_session):
    def _make(name="Alice", email=None):
        user = _user(db_session, "investor", email)
        investor = Investor(investor_id=user.user_id, name=name)
        db_session.add(investor)
        db_session.commit()
        return investor
    return _make


@pytest.fixture()
def make_fund(db_session):
    def _make(agent, name="Harbor Growth Fund III", **fields):
        fund = Fund(uploaded_by_agent_id=agent.agent_id, name=name, **fields)
        db_session.add(fund)
        db_session.commit()
        return fund
    return _make


@pytest.fixture()
def make_conversation(db_session):
    def _make(investor, agent, **fields):
        conversation = Conversation(
            investor_id=investor.investor_id,
            agent_id=agent.agent_id,
            created_at=BASE_TIME,
            **fields,
        )
        db_session.add(conversation)
        db_session.commit()
        return conversation
    return _make


@pytest.fixture()
def add_message(db_session):
    """Insert a message row directly (no event published)."""
    def _add(conversation, sender_id, content="hi", at=None):
        message = Message(
            conversation_id=conversation.conversation_id,
            sender_id=sender_id,
            content=content,
            timestamp=at or BASE_TIME,
        )
        db_session.add(message)
        db_session.commit()
        return message
    return _add


@pytest.fixture()
def login_as(client):
    """Put a session payload straight into the test client's cookie."""
    def _login(user_id, role, email="user@example.com"):
        with client.session_transaction() as sess:
            sess[SESSION_KEY] = {"user_id": user_id, "role": role, "email": email}
    return _login

class RecordingMailer:
    """Collects outgoing mail instead of talking to an SMTP server."""

    def __init__(self):
        self.sent = []

    def send(self, to, subject, body):
        self.sent.append({"to": to, "subject": subject, "body": body})
        return True

    def token_for(self, email):
        body = [mail for mail in self.sent if mail["to"] == email][-1]["body"]
        return body.split("token=", 1)[1].split()[0]


@pytest.fixture()
def mailer(monkeypatch):
    recorder = RecordingMailer()
    monkeypatch.setattr("fundconnect.auth.services.session_service.SmtpMailer", lambda: recorder)
    return recorder
