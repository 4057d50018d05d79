"""
Journal entry and journal line models.

An entry groups two or more lines whose debits and credits must
balance. The balance rule is enforced by JournalEntryService when
the entry is created; the models are just the data structure.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Boolean, DateTime, Integer, Numeric, ForeignKey
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledgerx.models.base import Base


class JournalEntry(Base):
    """
    A dated, referenced group of journal lines.

    Drafts (is_posted=False) can be edited and deleted. Posting is
    one-way: a posted entry is a permanent record.
    """

    __tablename__ = "journal_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    reference_number: Mapped[str] = mapped_column(
        String(50), nullable=False, index=True
    )
    entry_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True
    )
    is_posted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    lines: Mapped[list["JournalLine"]] = relationship(
        back_populates="entry",
        order_by="JournalLine.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        state = "posted" if self.is_posted else "draft"
        return f"<JournalEntry {self.reference_number} ({state})>"


class JournalLine(Base):
    """One debit or one credit within an entry, never both."""

    __tablename__ = "journal_lines"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    entry_id: Mapped[str] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Free references: neither is checked against the accounts table.
    account_id: Mapped[str] = mapped_column(
        String(36), nullable=False, default=""
    )
    account_code: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )
    debit_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    credit_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    narration: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )

    entry: Mapped["JournalEntry"] = relationship(back_populates="lines")

    def __repr__(self) -> str:
        return (
            f"<JournalLine {self.account_code} "
            f"Dr {self.debit_amount} Cr {self.credit_amount}>"
        )
