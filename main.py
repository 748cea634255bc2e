'''
FastAPI application for the Hotel Booking System.

The app exposes endpoints to manage the rooms, customers and bookings of a
single hotel.

Available endpoints:
- /rooms: Add, list, remove rooms; query available rooms (optionally by bed size).
- /customers: Register, list, remove customers.
- /bookings: Book a room, check out, list all / closed bookings.
'''

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from bootstrap_script import seed_sample_data
from config import load_settings
from Hotels.hotel import Hotel

# routers
from api.booking_routes import booking_router
from api.customer_routes import customer_router
from api.handlers import register_error_handlers
from api.room_routes import room_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.hotel = Hotel(late_fee_rate=settings.late_fee_rate)   # create ONCE
    if settings.seed_sample_data:
        seed_sample_data(app.state.hotel)
    logger.info("Hotel ready")
    yield

# Initialize FastAPI app
app = FastAPI(title="Hotel Booking System API", version="1.0.0", lifespan=lifespan)
register_error_handlers(app)

app.include_router(room_router, prefix="/rooms", tags=["Rooms"])
app.include_router(customer_router, prefix="/customers", tags=["Customers"])
app.include_router(booking_router, prefix="/bookings", tags=["Bookings"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Hotel Booking System API"}

if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)
