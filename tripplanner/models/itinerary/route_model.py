from sqlalchemy import Column, Integer, String, Date, Numeric, Float, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from tripplanner.core.database import Base
from tripplanner.models.bookings.base import TripChildMixin
from tripplanner.utils.time_format import utc_now

class Route(TripChildMixin, Base):
    __tablename__ = "routes"

    name = Column(String, nullable=False)
    name_he = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    description_he = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=True)
    distance_km = Column(Numeric(10, 2), nullable=True)
    estimated_duration = Column(Integer, nullable=True)  # minutes
    road_type = Column(String(100), nullable=True)
    # Serialized JSON map configuration (center, zoom, waypoints)
    map_data = Column(Text, nullable=True)

    points = relationship(
        "RoutePointOfInterest",
        back_populates="route",
        order_by="RoutePointOfInterest.sort_order",
        cascade="all, delete-orphan",
    )


class RoutePointOfInterest(Base):
    __tablename__ = "route_points_of_interest"

    id = Column(Integer, primary_key=True, index=True)
    route_id = Column(Integer, ForeignKey("routes.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    name_he = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    place_id = Column(String(255), nullable=True)
    poi_type = Column(String(50), nullable=False, default="attraction")
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utc_now)

    route = relationship("Route", back_populates="points")
