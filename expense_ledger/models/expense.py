from datetime import date
from decimal import Decimal
from sqlalchemy import Date, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base

class Expense(Base):
    __tablename__ = "expenses"
    # ids are never reused after a delete, SQLite included
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    memo: Mapped[str] = mapped_column(Text, nullable=False)
    created_on: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=func.current_date()
    )
