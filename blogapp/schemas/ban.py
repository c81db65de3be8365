"""Moderation request bodies."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationInfo, field_validator

from blogapp.configs.settings import BAN_REASON_MIN_LENGTH


class BanUserInput(BaseModel):
    """
    Body of ``PUT /sa/users/{id}/ban``.

    ``banReason`` is mandatory when banning and ignored when unbanning.
    After trimming it must hold at least ``BAN_REASON_MIN_LENGTH`` (20)
    characters, so one-word reasons such as ``"x"`` are rejected with a
    ``banReason`` field error.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_banned: StrictBool = Field(..., alias="isBanned")
    ban_reason: str | None = Field(
        default=None,
        alias="banReason",
        validate_default=True,
        examples=["Repeated spam in comments of several blogs"],
    )

    @field_validator("ban_reason")
    @classmethod
    def validate_reason(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Require a long enough reason when the user is being banned."""
        if not info.data.get("is_banned"):
            return v
        reason = (v or "").strip()
        if len(reason) < BAN_REASON_MIN_LENGTH:
            mssg = f"banReason must be at least {BAN_REASON_MIN_LENGTH} characters"
            raise ValueError(mssg)
        return reason

    def as_reason(self) -> str | None:
        return self.ban_reason if self.is_banned else None


class BanBlogInput(BaseModel):
    """Body of ``PUT /sa/blogs/{id}/ban``."""

    model_config = ConfigDict(populate_by_name=True)

    is_banned: StrictBool = Field(..., alias="isBanned")
