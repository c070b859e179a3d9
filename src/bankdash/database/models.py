"""SQLAlchemy models for the bankdash document store."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def generate_id() -> str:
    """Generate a document ID."""
    return uuid.uuid4().hex


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_id)
    email = Column(String, unique=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    banks = relationship("Bank", back_populates="user", cascade="all, delete-orphan")
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")


class UserSession(Base):
    """Session token model."""

    __tablename__ = "sessions"

    token = Column(String, primary_key=True, default=generate_id)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    expires_at = Column(DateTime, nullable=True)

    # Relationships
    user = relationship("User", back_populates="sessions")


class Bank(Base):
    """Bank link model."""

    __tablename__ = "banks"

    id = Column(String, primary_key=True, default=generate_id)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    account_id = Column(String, nullable=False)
    item_id = Column(String, nullable=False)
    access_token = Column(String, nullable=False)
    shareable_id = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    user = relationship("User", back_populates="banks")


class Transfer(Base):
    """Transfer model."""

    __tablename__ = "transfers"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    channel = Column(String, nullable=False)
    category = Column(String, nullable=False)
    sender_id = Column(String, ForeignKey("users.id"), nullable=False)
    sender_bank_id = Column(String, ForeignKey("banks.id"), nullable=False)
    receiver_id = Column(String, ForeignKey("users.id"), nullable=False)
    receiver_bank_id = Column(String, ForeignKey("banks.id"), nullable=False)
    email = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
