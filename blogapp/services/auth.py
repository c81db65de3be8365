"""Authentication service issuing JWT access tokens."""

from datetime import timedelta

from blogapp.configs import settings
from blogapp.errors.auth import InvalidCredentialsError
from blogapp.managers.password_manager import verify_and_update_password
from blogapp.managers.token_manager import create_access_token
from blogapp.models import UserDB
from blogapp.monitoring import get_logger
from blogapp.repositories import UserRepository
from blogapp.schemas.auth import Token

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, login_or_email: str, password: str) -> UserDB:
        """
        Authenticate a user by login or email and password.

        Args:
            login_or_email: User login or email
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the credentials are wrong or the user
                is banned
        """
        user = await self.user_repo.get_by_login_or_email(login_or_email)
        is_valid, new_hash = await verify_and_update_password(
            password,
            user.password_hash if user else None,
        )
        if user is None or not is_valid:
            raise InvalidCredentialsError

        if user.is_banned:
            logger.info("Login refused for banned user", user_id=str(user.id))
            raise InvalidCredentialsError

        if new_hash:
            await self.user_repo.update_fields(user.id, password_hash=new_hash)

        return user

    @staticmethod
    def create_token_for_user(user: UserDB) -> Token:
        access_token = create_access_token(
            user_id=user.id,
            login=user.login,
            role=user.role,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return Token(access_token=access_token)

    async def login(self, login_or_email: str, password: str) -> Token:
        user = await self.authenticate_user(login_or_email, password)
        logger.info("User logged in", user_id=str(user.id))
        return self.create_token_for_user(user)
