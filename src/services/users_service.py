"""User accounts, login and token-based lookup.

Passwords are compared through `User.check_password`; hashing at rest is
handled by the User model itself. Tokens are issued and checked by
`JwtService`.
"""

import logging
from typing import Optional

from jose import JWTError

from src.db.models import User
from src.db.repository import RepositoryInterface
from src.schemas import CreateAccountInput, EditProfileInput, LoginInput

from .jwt_service import JwtService
from .results import CoreOutput, ErrorKind, LoginOutput, UserProfileOutput

logger = logging.getLogger(__name__)

EMAIL_TAKEN_ERROR = "There is a user with that email already"
USER_NOT_FOUND_ERROR = "User not found"
WRONG_PASSWORD_ERROR = "Wrong password"
INVALID_TOKEN_ERROR = "Invalid token"


def _redact_email(email: str) -> str:
    """Redact email address for logging (PII protection).

    Args:
        email: Full email address.

    Returns:
        Redacted email showing only domain (e.g., "***@example.com").
    """
    if "@" not in email:
        return "<invalid-email>"
    _, domain = email.split("@", 1)
    return f"***@{domain}"


class UsersService:
    """Service for user accounts."""

    def __init__(self, user_repository: RepositoryInterface[User], jwt_service: JwtService):
        self.user_repository = user_repository
        self.jwt_service = jwt_service

    def _email_taken(self, email: str, user_id: Optional[int] = None) -> bool:
        """Check whether an account other than `user_id` already uses `email`."""
        owner = self.user_repository.find_one(email=email)
        return owner is not None and owner.id != user_id

    def create_account(self, create_account_input: CreateAccountInput) -> CoreOutput:
        """
        Register a new account unless the email is already taken.

        Returns:
            CoreOutput: ok with no payload, or the email-taken failure.
        """
        email = create_account_input.email
        try:
            taken = self._email_taken(email)
        except Exception:
            logger.exception(f"Failed to look up account {_redact_email(email)}")
            return CoreOutput.internal_error()
        if taken:
            return CoreOutput.invalid(EMAIL_TAKEN_ERROR)

        try:
            user = self.user_repository.create(**create_account_input.model_dump())
            self.user_repository.save(user)
        except Exception:
            logger.exception(f"Failed to create account for {_redact_email(email)}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)

    def login(self, login_input: LoginInput) -> LoginOutput:
        """
        Check credentials and issue a token for the user's id.

        The signer is only called once the password has matched.
        """
        try:
            user = self.user_repository.find_one(email=login_input.email)
            if not user:
                return LoginOutput.failure(USER_NOT_FOUND_ERROR, ErrorKind.NOT_FOUND)
            if not user.check_password(login_input.password):
                return LoginOutput.invalid(WRONG_PASSWORD_ERROR)
            token = self.jwt_service.sign(user.id)
        except Exception:
            logger.exception(f"Failed to log in {_redact_email(login_input.email)}")
            return LoginOutput.internal_error()
        return LoginOutput(ok=True, token=token)

    def find_by_id(self, user_id: int) -> UserProfileOutput:
        try:
            user = self.user_repository.find_by_id(user_id)
        except Exception:
            logger.exception(f"Failed to load user {user_id}")
            return UserProfileOutput.internal_error()
        if user is None:
            return UserProfileOutput.not_found("User", user_id)
        return UserProfileOutput(ok=True, user=user)

    def edit_profile(self, user_id: int, edit_profile_input: EditProfileInput) -> CoreOutput:
        """
        Apply profile changes to an existing user.

        Unset fields are left untouched. A new email must not belong to
        another account. A new password is hashed when the user is saved.
        """
        result = self.find_by_id(user_id)
        if not result.ok:
            return CoreOutput.propagate(result)

        user = result.user
        changes = edit_profile_input.model_dump(exclude_unset=True, exclude_none=True)
        new_email = changes.get("email")
        if new_email and new_email != user.email:
            try:
                taken = self._email_taken(new_email, user_id=user.id)
            except Exception:
                logger.exception(f"Failed to look up account {_redact_email(new_email)}")
                return CoreOutput.internal_error()
            if taken:
                return CoreOutput.invalid(EMAIL_TAKEN_ERROR)

        try:
            for key, value in changes.items():
                setattr(user, key, value)
            self.user_repository.save(user)
        except Exception:
            logger.exception(f"Failed to update profile of user {user_id}")
            return CoreOutput.internal_error()
        return CoreOutput(ok=True)

    def get_user_from_token(self, token: str) -> UserProfileOutput:
        """
        Resolve the user a token was issued for.

        Invalid or expired tokens are an expected failure and are not logged.
        """
        try:
            payload = self.jwt_service.verify(token)
        except JWTError:
            return UserProfileOutput.invalid(INVALID_TOKEN_ERROR)
        except Exception:
            logger.exception("Failed to verify token")
            return UserProfileOutput.internal_error()

        user_id = payload.get("id")
        if user_id is None:
            return UserProfileOutput.invalid(INVALID_TOKEN_ERROR)
        return self.find_by_id(user_id)
