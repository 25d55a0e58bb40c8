import logging

import pytest
from itsdangerous import URLSafeTimedSerializer

from fundconnect.auth.services.session_service import SESSION_KEY, VERIFICATION_SALT, SessionService
from fundconnect.auth.services.session_storage import InMemorySessionStorage
from fundconnect.base import constants
from fundconnect.models import Agent, Investor, User
from fundconnect.util.exceptions import (
    NotFoundException,
    PolicyDeniedException,
    ServiceException,
    UnauthorizedException,
)


@pytest.fixture()
def service(app, mailer):
    return SessionService(InMemorySessionStorage(), mailer=mailer)


def test_register_creates_profile_and_signs_in(service, db_session):
    payload = service.register({
        "email": "Bob@Harbor.example",
        "password": "password123",
        "role": "agent",
        "name": "Bob",
        "firm": "Harbor",
    })

    assert payload["email"] == "bob@harbor.example"
    assert payload["role"] == "agent"
    assert service.get_session() == payload
    assert db_session.get(Agent, payload["user_id"]).firm == "Harbor"


def test_register_investor_and_duplicate_email(service, db_session):
    payload = service.register({
        "email": "alice@example.com", "password": "password123", "role": "investor", "name": "Alice",
    })
    assert db_session.get(Investor, payload["user_id"]).name == "Alice"

    with pytest.raises(ServiceException) as exc:
        service.register({
            "email": "alice@example.com", "password": "password123", "role": "investor", "name": "Alice",
        })
    assert exc.value.error_code == "EMAIL_ALREADY_REGISTERED"


def test_sign_in_sign_out(service, make_investor, db_session):
    investor = make_investor()
    email = db_session.get(User, investor.investor_id).email

    with pytest.raises(UnauthorizedException):
        service.sign_in(email, "wrong-password")

    service.sign_in(email, "password123")
    assert service.require_session()["user_id"] == investor.investor_id

    service.sign_out()
    assert service.get_session() is None
    with pytest.raises(UnauthorizedException):
        service.require_session()


def test_require_session_checks_role(app):
    storage = InMemorySessionStorage({SESSION_KEY: {"user_id": "u1", "role": "agent", "email": "a@b.c"}})
    service = SessionService(storage)

    assert service.require_session("agent")["user_id"] == "u1"
    with pytest.raises(PolicyDeniedException):
        service.require_session("investor")


def test_resend_verification(service, make_agent, db_session):
    agent = make_agent(email="bob@harbor.example")

    result = service.resend_verification("BOB@harbor.example")

    assert result["email"] == "bob@harbor.example"
    assert db_session.get(User, agent.agent_id).verification_sent_at is not None

    with pytest.raises(NotFoundException):
        service.resend_verification("nobody@example.com")


def test_auth_endpoints(client):
    bad = client.post("/api/auth/register", json={
        "email": "x@example.com", "password": "short", "role": "investor", "name": "X",
    })
    assert bad.status_code == 400
    assert bad.get_json()["message"] == "Password must be at least 8 characters."

    admin = client.post("/api/auth/register", json={
        "email": "x@example.com", "password": "password123", "role": "admin", "name": "X",
    })
    assert admin.status_code == 400

    created = client.post("/api/auth/register", json={
        "email": "x@example.com", "password": "password123", "role": "investor", "name": "X",
    })
    assert created.status_code == 201

    current = client.get("/api/auth/session")
    assert current.status_code == 200
    assert current.get_json()["data"]["email"] == "x@example.com"

    assert client.post("/api/auth/sign-out").status_code == 200
    assert client.get("/api/auth/session").status_code == 401

    wrong = client.post("/api/auth/sign-in", json={"email": "x@example.com", "password": "nope-nope"})
    assert wrong.status_code == 401

    signed_in = client.post("/api/auth/sign-in", json={"email": "x@example.com", "password": "password123"})
    assert signed_in.status_code == 200
    assert client.get("/api/auth/session").status_code == 200

    resent = client.post("/api/auth/resend-verification", json={"email": "x@example.com"})
    assert resent.status_code == 200


def test_register_sends_verification_email(service, mailer):
    service.register({
        "email": "carol@example.com", "password": "password123", "role": "investor", "name": "Carol",
    })

    assert [mail["to"] for mail in mailer.sent] == ["carol@example.com"]
    assert "/auth/verify?token=" in mailer.sent[0]["body"]


def test_verification_token_is_mailed_not_logged(service, mailer, make_agent, db_session, caplog):
    caplog.set_level(logging.INFO)
    agent = make_agent(email="bob@harbor.example")

    service.resend_verification("bob@harbor.example")
    token = mailer.token_for("bob@harbor.example")

    assert token not in caplog.text

    result = service.verify_email(token)

    assert result["email_verified"] is True
    assert db_session.get(User, agent.agent_id).email_verified is True

    with pytest.raises(ServiceException) as exc:
        service.resend_verification("bob@harbor.example")
    assert exc.value.error_code == "EMAIL_ALREADY_VERIFIED"


def test_expired_verification_token(service, mailer, make_agent, db_session, monkeypatch):
    agent = make_agent(email="bob@harbor.example")
    service.resend_verification("bob@harbor.example")
    token = mailer.token_for("bob@harbor.example")

    monkeypatch.setattr(constants, "EMAIL_VERIFICATION_MAX_AGE", -1)

    with pytest.raises(ServiceException) as exc:
        service.verify_email(token)

    assert exc.value.error_code == "VERIFICATION_TOKEN_EXPIRED"
    assert db_session.get(User, agent.agent_id).email_verified is False


def test_tampered_verification_token(service, make_agent):
    make_agent(email="bob@harbor.example")
    forged = URLSafeTimedSerializer("another-secret", salt=VERIFICATION_SALT).dumps("bob@harbor.example")

    for token in (forged, "not-a-token"):
        with pytest.raises(ServiceException) as exc:
            service.verify_email(token)
        assert exc.value.error_code == "VERIFICATION_TOKEN_INVALID"


def test_verify_endpoint(client, mailer):
    client.post("/api/auth/register", json={
        "email": "dana@example.com", "password": "password123", "role": "investor", "name": "Dana",
    })
    token = mailer.token_for("dana@example.com")

    assert client.post("/api/auth/verify", json={}).status_code == 400
    assert client.post("/api/auth/verify", json={"token": "not-a-token"}).status_code == 400

    verified = client.post("/api/auth/verify", json={"token": token})
    assert verified.status_code == 200
    assert verified.get_json()["data"] == {
        "email": "dana@example.com",
        "email_verified": True,
        "message": "Email verified.",
    }
