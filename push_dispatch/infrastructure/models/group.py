"""SQLAlchemy models for the gym registries used to find administrators."""

from sqlalchemy import Column, String

from push_dispatch.infrastructure.database import Base


class GymInfoModel(Base):
    """Primary gym registry."""

    __tablename__ = "gym_info"

    id = Column(String(128), primary_key=True)
    name = Column(String(120), nullable=True)
    admin_uid = Column(String(128), nullable=True)
    owner_id = Column(String(128), nullable=True)


class GymModel(Base):
    """Secondary gym registry kept for older entries."""

    __tablename__ = "gyms"

    id = Column(String(128), primary_key=True)
    name = Column(String(120), nullable=True)
    admin_uid = Column(String(128), nullable=True)
    owner_id = Column(String(128), nullable=True)


__all__ = ["GymInfoModel", "GymModel"]
