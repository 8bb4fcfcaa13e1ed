"""SQLAlchemy models for the device token registries."""

from sqlalchemy import Column, DateTime, String, func

from push_dispatch.infrastructure.database import Base


class AdminAccountModel(Base):
    """Administrator registered in the web console."""

    __tablename__ = "admin_account"

    uid = Column(String(128), primary_key=True)
    name = Column(String(120), nullable=True)
    web_fcm_token = Column(String(512), nullable=True)
    fcm_token = Column(String(512), nullable=True)
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


class UserAccountModel(Base):
    """Mobile application user."""

    __tablename__ = "user_account"

    uid = Column(String(128), primary_key=True)
    name = Column(String(120), nullable=True)
    fcm_token = Column(String(512), nullable=True)
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["AdminAccountModel", "UserAccountModel"]
