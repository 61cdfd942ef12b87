"""SQLAlchemy model for the account_external_ids table.

An external id is a ``scheme:rest`` key linked to an account, optionally
carrying an email address. The ``username:`` scheme records the account's
username; email addresses attached to any external id are the account's
secondary emails.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from singleusergroup.infrastructure.persistence.database import Base

SCHEME_USERNAME = "username:"
SCHEME_MAILTO = "mailto:"


class AccountExternalIdModel(Base):
    """SQLAlchemy model for the account_external_ids table.

    Attributes:
        external_id: Primary key in ``scheme:rest`` form.
        account_id: Foreign key to accounts table.
        email_address: Email address associated with this external id.
    """

    __tablename__ = "account_external_ids"

    external_id: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        comment="External id key (scheme:rest)",
    )
    account_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email_address: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )

    account: Mapped["AccountModel"] = relationship(  # noqa: F821
        "AccountModel",
        back_populates="external_ids",
    )

    def is_scheme(self, scheme: str) -> bool:
        return self.external_id.startswith(scheme)

    @property
    def scheme_rest(self) -> str:
        """Portion of the key after the scheme."""
        return self.external_id.partition(":")[2]

    def __repr__(self) -> str:
        return f"<AccountExternalId(external_id={self.external_id}, account_id={self.account_id})>"
