"""
Moderation (ban) state machine shared by users and blogs.

An entity is either ``ACTIVE`` or ``BANNED``. Banning stamps the current
time (and, for users, a mandatory reason); unbanning clears both. Banning a
banned entity refreshes the stamp, unbanning an active one changes nothing.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from blogapp.errors.validation import ValidationError
from blogapp.utils.helpers import utc_now


class ModerationState(StrEnum):
    ACTIVE = "active"
    BANNED = "banned"

    @classmethod
    def of(cls, is_banned: bool) -> "ModerationState":
        return cls.BANNED if is_banned else cls.ACTIVE


@dataclass(frozen=True)
class BanTransition:
    """Column values to persist for the target moderation state."""

    is_banned: bool
    ban_date: datetime | None
    ban_reason: str | None

    @property
    def state(self) -> ModerationState:
        return ModerationState.of(self.is_banned)


def transition(
    is_banned: bool,
    reason: str | None = None,
    *,
    require_reason: bool = True,
    now: datetime | None = None,
) -> BanTransition:
    """
    Compute the ban record for the requested state.

    Args:
        is_banned: Target state.
        reason: Ban reason; ignored when unbanning or when reasons are not
            tracked for the entity.
        require_reason: Whether banning needs a non-empty reason.
        now: Timestamp to stamp on a ban (defaults to the current UTC time).

    Returns:
        BanTransition: The values to write in a single update.

    Raises:
        ValidationError: When banning without a required reason.
    """
    if not is_banned:
        return BanTransition(is_banned=False, ban_date=None, ban_reason=None)

    cleaned = (reason or "").strip() or None
    if require_reason and cleaned is None:
        raise ValidationError.for_field("banReason", "banReason is required to ban")

    return BanTransition(
        is_banned=True,
        ban_date=now or utc_now(),
        ban_reason=cleaned if require_reason else None,
    )
