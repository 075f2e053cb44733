"""
SQLAlchemy models for the gateway tables.

The hosted database owns the schema; these mirror it so the tables can be
created for local development and tests.
"""
from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

JSONVariant = JSON().with_variant(JSONB(), "postgresql")


class Plan(Base):
    __tablename__ = "plans"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    features = Column(JSONVariant, default=list)


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False)
    plan_id = Column(Text, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(Text, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


TABLES = {
    model.__tablename__: model
    for model in (Plan, Subscription, Message, ContactMessage)
}
