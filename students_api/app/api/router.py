"""
Top‑level router for the API.

Domain routers are mounted here under ``/api``; the application
includes this router once in ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
