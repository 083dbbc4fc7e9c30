from .user.user import User
from .trips.trip_model import Trip
from .trips.collaborator import TripCollaborator
from .trips.activity_log import ActivityLog
from .trips.checklist_models import ChecklistItem
from .trips.traveler import Traveler
from .bookings.hotel import Hotel
from .bookings.transportation import Transportation
from .bookings.car_rental import CarRental
from .bookings.restaurant import Restaurant
from .bookings.tourist_site import TouristSite
from .documents.document import Document
from .payments.payment import Payment
from .itinerary.day_trip import DayTrip
from .itinerary.route_model import Route, RoutePointOfInterest
