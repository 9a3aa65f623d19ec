"""SQLAlchemy models for the splitledger database."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    CheckConstraint,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its text form, so every digit survives on any backend.

    SQLite keeps NUMERIC values as binary floats.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class ExpenseRow(Base):
    """Expense model.

    ``position`` keeps the ledger's newest-first order; 0 is the newest row.
    """

    __tablename__ = "expenses"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    description = Column(String, nullable=False)
    amount = Column(ExactDecimal, nullable=False)
    paid_by = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    split_type = Column(String, nullable=False, default="equal")
    sharath_percent = Column(Integer, nullable=False, default=50)
    thejas_percent = Column(Integer, nullable=False, default=50)
    category = Column(String, nullable=False, default="other")
    timestamp = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("sharath_percent + thejas_percent = 100", name="ck_percent_sum"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
