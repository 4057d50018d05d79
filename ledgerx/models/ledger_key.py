"""
Ledger key model.

Keys are metadata records around 32 random bytes. They are
generated, rotated, deactivated and deleted, but nothing in the
ledger uses them to encrypt anything yet.
"""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ledgerx.models.base import Base


class LedgerKey(Base):
    __tablename__ = "ledger_keys"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    key_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Base64 of 32 random bytes; never serialized in API responses.
    encryption_key: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, default=None
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )

    def __repr__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"<LedgerKey {self.key_name} ({state})>"
