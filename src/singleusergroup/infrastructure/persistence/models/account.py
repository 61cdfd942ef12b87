"""SQLAlchemy model for the accounts table of the account directory."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from singleusergroup.infrastructure.persistence.database import Base


class AccountModel(Base):
    """SQLAlchemy model for the accounts table.

    Usernames and secondary email addresses are not columns of this table;
    they are stored as external ids (see AccountExternalIdModel).

    Attributes:
        id: Numeric account id (primary key).
        full_name: Full display name.
        preferred_email: Preferred email address.
        is_active: Whether the account is active.
        registered_on: Timestamp when the account was created.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
        comment="Numeric account id",
    )
    full_name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
        comment="Full display name",
    )
    preferred_email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
        comment="Preferred email address",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )
    registered_on: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    external_ids: Mapped[list["AccountExternalIdModel"]] = relationship(  # noqa: F821
        "AccountExternalIdModel",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="AccountExternalIdModel.external_id",
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, full_name={self.full_name})>"
