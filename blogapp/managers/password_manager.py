"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU-bound, so the async helpers run it in a thread pool to keep
the event loop free.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from blogapp.configs import CONFIG_MAP, settings
from blogapp.errors.password_hasher import PasswordHashingError, PasswordRehashError
from blogapp.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using Argon2id.

    This class wraps passlib's CryptContext to provide:
    - Password hashing with Argon2id at the configured cost level
    - Password verification
    - Detection of hashes made with outdated parameters
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("my_password", hashed)
            True
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and return a new hash if the current one is outdated.

        Returns:
            tuple[bool, str | None]: Whether the password matches, and the
            replacement hash when the stored one needs upgrading.
        """
        if hashed_password is None:
            # Keeps timing consistent for unknown accounts
            self.pwd_context.dummy_verify()
            return False, None

        if not self.verify(password, hashed_password):
            return False, None

        if not self.pwd_context.needs_update(hashed_password):
            return True, None

        try:
            new_hash = self.hash(password)
        except PasswordHashingError as e:
            mssg = "Failed to rehash password"
            raise PasswordRehashError(mssg) from e
        logger.info(f"Password rehashed on level {self.level}")
        return True, new_hash


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Return the process-wide hasher, creating it on first use."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """
    Verify a password and get a new hash if needed, off the event loop.

    Example:
        >>> is_valid, new_hash = await verify_and_update_password("password", hashed)
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
