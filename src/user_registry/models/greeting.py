"""Static greeting response models."""

from pydantic import BaseModel, Field


class HomeResponse(BaseModel):
    home: str = Field("Home page", description="Home page greeting")


class HelloResponse(BaseModel):
    hello: str = Field("Hello World!", description="Hello greeting")
