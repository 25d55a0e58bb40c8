"""
Service: SessionService

Identity collaborator used by every handler:
  - register / sign_in / sign_out
  - get_session / require_session
  - resend_verification / verify_email

The session payload is {"user_id", "role", "email"} and is kept in an
injected SessionStorage under SESSION_KEY.
"""

# Python Packages
from typing import Dict, Optional

# Flask / Werkzeug
from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

# SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.fc_user import User
from ...models.fc_agent import Agent
from ...models.fc_investor import Investor

# Invitations
from ...investors.services.invitation_service import InvitationService

# Mail
from ...vendors.mail.smtp_mailer import SmtpMailer

# Storage
from .session_storage import SessionStorage, FlaskSessionStorage

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import (
    NotFoundException,
    PolicyDeniedException,
    ServiceException,
    UnauthorizedException,
    TransientBackendException
)

# App Messages
from ...util import messages

# Helpers
from ...util.timeutil import utc_now, format_datetime
from ...util.logger import get_logger

logger = get_logger("auth.session")

SESSION_KEY = "fc_session"
VERIFICATION_SALT = "fundconnect-email-verification"





class SessionService:

    def __init__(self, storage: SessionStorage, session = None, mailer = None):
        self.storage = storage
        self.session = session or db.session
        self.mailer = mailer or SmtpMailer()


    @classmethod
    def from_request(cls) -> "SessionService":
        """ Cookie-backed service for the current request... """

        return cls(FlaskSessionStorage())


    # ── Session ───────────────────────────────────────────────────────────────

    def get_session(self) -> Optional[Dict]:
        return self.storage.get(SESSION_KEY)


    def require_session(self, role: Optional[str] = None) -> Dict:
        """
        Current session or 401. With *role*, also 403 for any other role.
        """

        current = self.get_session()

        if not current or not current.get("user_id"):
            raise UnauthorizedException(messages.ERROR["NOT_AUTHENTICATED"])

        if role and current.get("role") != role:
            raise PolicyDeniedException(messages.ERROR["ROLE_NOT_ALLOWED"].format(role = role))

        return current


    def sign_in(self, email: str, password: str) -> Dict:
        user = self.session.query(User).filter(User.email == email.strip().lower()).first()

        if not user or not check_password_hash(user.password_hash, password):
            raise UnauthorizedException(messages.ERROR["INVALID_CREDENTIALS"])

        payload = {
            "user_id": user.user_id,
            "role": user.role,
            "email": user.email
        }
        self.storage.set(SESSION_KEY, payload)

        logger.info("User signed in: %s", user.user_id)
        return payload


    def sign_out(self):
        self.storage.remove(SESSION_KEY)


    # ── Accounts ──────────────────────────────────────────────────────────────

    def register(self, args: dict) -> Dict:
        """
        Create a user plus its agent / investor profile, send the
        verification email, then sign in.

        Args:
            args (dict):
                {
                    "email": str,
                    "password": str,
                    "role": "agent" | "investor",
                    "name": str,
                    "firm": str (agents, optional),
                    "invitation_code": str (investors, optional)
                }

        An investor registering with a valid invitation code is linked to
        the inviting agent and approved straight away; without one the
        account waits for admin approval.
        """

        email = args["email"].strip().lower()

        if self.session.query(User).filter(User.email == email).first():
            raise ServiceException(
                error_code = "EMAIL_ALREADY_REGISTERED",
                message = messages.ERROR["EMAIL_ALREADY_REGISTERED"]
            )

        invitation = None
        if args.get("role") == constants.ROLE_INVESTOR and args.get("invitation_code"):
            invitation = InvitationService(self.session).find_claimable(args["invitation_code"])

        try:
            user = User(
                email = email,
                password_hash = generate_password_hash(args["password"]),
                role = args["role"],
                verification_sent_at = utc_now()
            )
            self.session.add(user)
            self.session.flush()

            if user.role == constants.ROLE_AGENT:
                self.session.add(Agent(
                    agent_id = user.user_id,
                    name = args["name"].strip(),
                    firm = args.get("firm")
                ))

            elif user.role == constants.ROLE_INVESTOR:
                self.session.add(Investor(
                    investor_id = user.user_id,
                    name = args["name"].strip(),
                    introducing_agent_id = invitation.agent_id if invitation else None,
                    approved = invitation is not None
                ))
                self.session.flush()

                if invitation:
                    invitation.used_at = utc_now()
                    invitation.used_by_investor_id = user.user_id

            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"Unable to register: {error}",
                details = str(error)
            )

        if invitation:
            logger.info("Investor %s joined through invitation from %s", user.user_id, invitation.agent_id)

        self._send_verification(user)

        return self.sign_in(email, args["password"])


    def resend_verification(self, email: str) -> Dict:
        """
        Email a fresh verification link and record when it was sent.
        """

        user = self.session.query(User).filter(User.email == email.strip().lower()).first()
        if not user:
            raise NotFoundException(messages.ERROR["USER_NOT_FOUND"])

        if user.email_verified:
            raise ServiceException(
                error_code = "EMAIL_ALREADY_VERIFIED",
                message = messages.ERROR["EMAIL_ALREADY_VERIFIED"]
            )

        try:
            user.verification_sent_at = utc_now()
            self.session.commit()

        except SQLAlchemyError as error:
            self.session.rollback()
            raise TransientBackendException(
                message = f"Unable to resend verification: {error}",
                details = str(error)
            )

        delivered = self._send_verification(user)

        return {
            "email": user.email,
            "verification_sent_at": format_datetime(user.verification_sent_at),
            "delivered": delivered,
            "message": messages.SUCCESS["VERIFICATION_SENT"]
        }


    def verify_email(self, token: str) -> Dict:
        """
        Redeem a verification token and mark the account's email verified.

        Raises:
            ServiceException: token expired (older than EMAIL_VERIFICATION_MAX_AGE)
                              or invalid / tampered
            NotFoundException: the account no longer exists
        """

        try:
            email = self._serializer().loads(token, max_age = constants.EMAIL_VERIFICATION_MAX_AGE)

        except SignatureExpired:
            raise ServiceException(
                error_code = "VERIFICATION_TOKEN_EXPIRED",
                message = messages.ERROR["VERIFICATION_TOKEN_EXPIRED"]
            )

        except BadSignature:
            raise ServiceException(
                error_code = "VERIFICATION_TOKEN_INVALID",
                message = messages.ERROR["VERIFICATION_TOKEN_INVALID"]
            )

        user = self.session.query(User).filter(User.email == email).first()
        if not user:
            raise NotFoundException(messages.ERROR["USER_NOT_FOUND"])

        if not user.email_verified:
            try:
                user.email_verified = True
                self.session.commit()

            except SQLAlchemyError as error:
                self.session.rollback()
                raise TransientBackendException(
                    message = f"Unable to verify email: {error}",
                    details = str(error)
                )

            logger.info("Email verified for user %s", user.user_id)

        return {
            "email": user.email,
            "email_verified": True,
            "message": messages.SUCCESS["EMAIL_VERIFIED"]
        }


    # ── Helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _serializer() -> URLSafeTimedSerializer:
        return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt = VERIFICATION_SALT)


    def _send_verification(self, user: User) -> bool:
        token = self._serializer().dumps(user.email)
        link = f"{constants.APP_BASE_URL.rstrip('/')}/auth/verify?token={token}"

        delivered = self.mailer.send(
            to = user.email,
            subject = "Verify your Fund Connect email",
            body = (
                "Welcome to Fund Connect.\n\n"
                f"Confirm your email address by opening this link:\n{link}\n\n"
                "The link expires in "
                f"{constants.EMAIL_VERIFICATION_MAX_AGE // 3600} hours."
            )
        )

        logger.info("Verification email issued for user %s (delivered=%s)", user.user_id, delivered)
        return delivered
