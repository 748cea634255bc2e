from fastapi import APIRouter, Depends
from fastapi import status
from fastapi.concurrency import run_in_threadpool

from .models import CustomerFields, CustomerListResponse, CustomerResponse, MessageResponse
from .deps import get_hotel
from .handlers import ERROR_RESPONSES
from Hotels.hotel import Hotel

import logging
logger = logging.getLogger(__name__)


# mount api router
customer_router = APIRouter(responses=ERROR_RESPONSES)

@customer_router.get("/health")
async def health_check():
    return {"status": "Customer service is healthy"}

@customer_router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(fields: CustomerFields, hotel: Hotel = Depends(get_hotel)) -> CustomerResponse:
    '''Register a customer, assigning the next sequential id when none is supplied.'''

    customer = await run_in_threadpool(hotel.register_customer, fields.name, fields.id)
    return CustomerResponse(status=status.HTTP_201_CREATED, customer=customer)

@customer_router.get("", response_model=CustomerListResponse)
async def get_customers(hotel: Hotel = Depends(get_hotel)) -> CustomerListResponse:

    return CustomerListResponse(status=status.HTTP_200_OK, customers=await run_in_threadpool(hotel.list_customers))

@customer_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, hotel: Hotel = Depends(get_hotel)) -> CustomerResponse:

    return CustomerResponse(status=status.HTTP_200_OK, customer=await run_in_threadpool(hotel.get_customer, customer_id))

@customer_router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(customer_id: int, hotel: Hotel = Depends(get_hotel)) -> MessageResponse:
    '''Remove a customer that holds no active booking.'''

    customer = await run_in_threadpool(hotel.remove_customer, customer_id)
    return MessageResponse(status=status.HTTP_200_OK, message=f"Customer {customer.name} deleted")
