"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from pocketwatcher.api.routes import auth, users, expenses, debts

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(expenses.router)
api_router.include_router(debts.router)
