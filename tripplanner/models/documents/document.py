from sqlalchemy import Column, String, Text, Enum, JSON
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import TripChildMixin
import enum

class DocumentCategory(str, enum.Enum):
    passport = "passport"
    visa = "visa"
    insurance = "insurance"
    booking = "booking"
    ticket = "ticket"
    flights = "flights"
    hotel = "hotel"
    other = "other"

class Document(TripChildMixin, Base):
    __tablename__ = "documents"

    name = Column(String, nullable=False)
    category = Column(Enum(DocumentCategory), nullable=False, default=DocumentCategory.other)
    file_url = Column(Text, nullable=False)
    file_key = Column(String(500), nullable=False)
    mime_type = Column(String(100), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
