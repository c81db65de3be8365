"""User administration use cases."""

from uuid import UUID

from blogapp.errors.database import DuplicateEntryError
from blogapp.errors.validation import ValidationError
from blogapp.managers.metrics import metrics_manager
from blogapp.managers.password_manager import hash_password
from blogapp.models import UserDB
from blogapp.monitoring import get_logger
from blogapp.repositories import UserRepository
from blogapp.schemas.auth import MeView
from blogapp.schemas.ban import BanUserInput
from blogapp.schemas.query import ListQuery, Page
from blogapp.schemas.user import UserCreate, UserView
from blogapp.services.moderation import transition

logger = get_logger(__name__)


class UserService:
    """Service for super-admin user management and moderation."""

    def __init__(self, user_repo: UserRepository) -> None:
        self.user_repo = user_repo

    async def list_for_admin(self, query: ListQuery) -> Page[UserView]:
        result = await self.user_repo.list_for_admin(query)
        items = [UserView.from_db(user) for (user,) in result.rows]
        return Page[UserView].of(query, result.total_count, items)

    async def create(self, data: UserCreate, *, role: str = "user") -> UserView:
        """
        Create a user.

        Args:
            data: Validated creation body.
            role: Stored role (``admin`` only from the bootstrap script).

        Returns:
            UserView: The created user.

        Raises:
            ValidationError: If the login or email is already taken.
        """
        if await self.user_repo.login_exists(data.login):
            raise ValidationError.for_field("login", "login should be unique")
        if await self.user_repo.email_exists(data.email):
            raise ValidationError.for_field("email", "email should be unique")

        try:
            user = await self.user_repo.add(
                UserDB(
                    login=data.login,
                    email=data.email,
                    password_hash=await hash_password(data.password.get_secret_value()),
                    role=role,
                ),
            )
        except DuplicateEntryError as e:
            # Lost a race with a concurrent insert of the same login or email
            field = "email" if "email" in e.detail.lower() else "login"
            raise ValidationError.for_field(field, f"{field} should be unique") from e

        logger.info("User created", user_id=str(user.id), role=role)
        return UserView.from_db(user)

    async def delete(self, user_id: UUID) -> bool:
        deleted = await self.user_repo.delete_by_id(user_id)
        if deleted:
            logger.info("User deleted", user_id=str(user_id))
        return deleted

    async def set_ban_status(self, user_id: UUID, data: BanUserInput) -> bool:
        change = transition(data.is_banned, data.as_reason())
        updated = await self.user_repo.set_ban(
            user_id,
            is_banned=change.is_banned,
            ban_date=change.ban_date,
            ban_reason=change.ban_reason,
        )
        if updated:
            metrics_manager.record_moderation("user.ban" if change.is_banned else "user.unban")
            logger.info("User moderation changed", user_id=str(user_id), state=change.state)
        return updated

    @staticmethod
    def get_me(user: UserDB) -> MeView:
        return MeView(user_id=user.id, login=user.login, email=user.email)
