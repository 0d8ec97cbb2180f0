"""
Palette Picker Backend — Root Route
=====================================

What:  GET / answers with a plain-text greeting.
Why:   Cheapest possible "is the server up" probe for humans and smoke tests.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

GREETING = "We're going to test all the routes!"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return GREETING
