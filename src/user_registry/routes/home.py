"""Greeting routes."""

from fastapi import APIRouter

from user_registry.models.greeting import HelloResponse, HomeResponse

router = APIRouter(tags=["home"])


@router.get("/", response_model=HomeResponse)
async def home() -> HomeResponse:
    return HomeResponse()


@router.get("/index", response_model=HelloResponse)
async def index() -> HelloResponse:
    return HelloResponse()
