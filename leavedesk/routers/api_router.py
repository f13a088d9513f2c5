from fastapi import APIRouter
from leavedesk.routers import employees, leaves

# Centralized API router hub; main.py only imports this one.
api_router = APIRouter()

api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(leaves.router, tags=["Leaves"])
