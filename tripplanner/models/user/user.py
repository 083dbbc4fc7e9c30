from sqlalchemy import Column, String, Boolean, Integer, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy import Enum
from tripplanner.core.database import Base
from tripplanner.utils.time_format import utc_now
import enum

class UserRole(str, enum.Enum):
    user = "user"
    admin = "admin"

class Language(str, enum.Enum):
    en = "en"
    he = "he"

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    hashed_password = Column(String, nullable=True)
    auth_type = Column(String, default="local")  # local, google, demo
    role = Column(Enum(UserRole), nullable=False, default=UserRole.user)
    preferred_language = Column(Enum(Language), nullable=False, default=Language.en)

    is_demo_user = Column(Boolean, nullable=False, default=False)
    demo_start_date = Column(DateTime, nullable=True)
    demo_expiry_date = Column(DateTime, nullable=True)
    max_trips = Column(Integer, nullable=True)  # None means unlimited

    created_at = Column(DateTime, default=utc_now)
    last_signed_in = Column(DateTime, default=utc_now)

    trips = relationship("Trip", back_populates="owner")
    collaborations = relationship("TripCollaborator", back_populates="user", foreign_keys="TripCollaborator.user_id")
