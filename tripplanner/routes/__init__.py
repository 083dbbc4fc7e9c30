# tripplanner/routes/__init__.py
from fastapi import APIRouter
from tripplanner.routes.auth import auth, users
from tripplanner.routes.trip import trip_routes, shared, collaborators, checklist, travelers, activity
from tripplanner.routes.bookings import booking_routes
from tripplanner.routes.documents import document_routes
from tripplanner.routes.payments import payment_routes
from tripplanner.routes.budget import budget_routes
from tripplanner.routes.itinerary import day_trip_routes, route_routes, timeline_routes
from tripplanner.routes.demo import demo_routes


api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router)
api_router.include_router(users.router)

# Trip routes
api_router.include_router(collaborators.router)
api_router.include_router(trip_routes.router)
api_router.include_router(shared.router)
api_router.include_router(checklist.router)
api_router.include_router(travelers.router)
api_router.include_router(activity.router)

# Bookings
api_router.include_router(booking_routes.hotels_router)
api_router.include_router(booking_routes.transportation_router)
api_router.include_router(booking_routes.car_rentals_router)
api_router.include_router(booking_routes.restaurants_router)
api_router.include_router(booking_routes.tourist_sites_router)

# Documents, payments and budget
api_router.include_router(document_routes.router)
api_router.include_router(payment_routes.router)
api_router.include_router(budget_routes.router)

# Itinerary
api_router.include_router(day_trip_routes.router)
api_router.include_router(route_routes.router)
api_router.include_router(timeline_routes.router)

# Demo
api_router.include_router(demo_routes.router)
