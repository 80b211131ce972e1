"""User models for the User Registry API.

On the wire a user is ``{"id", "Firstname", "Surname"}``; in Python the name
fields are ``first_name`` and ``surname``. Request bodies are only accepted
under the wire names; every model serializes by alias.
"""

from pydantic import BaseModel, ConfigDict, Field

USER_CREATE_FIELDS = ("id", "Firstname", "Surname")
USER_UPDATE_FIELDS = ("Firstname", "Surname")


class User(BaseModel):
    """User entity model."""

    id: str = Field(..., description="Unique identifier for the user")
    first_name: str = Field(..., alias="Firstname", description="First name of the user")
    surname: str = Field(..., alias="Surname", description="Surname of the user")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "Firstname": "Jyri",
                "Surname": "Kemppainen",
            }
        },
    )


class UserCreate(BaseModel):
    """Body of ``POST /data``. Exactly the three user fields, all non-empty."""

    id: str = Field(..., min_length=1, description="Unique identifier for the user")
    first_name: str = Field(..., alias="Firstname", min_length=1, description="First name of the user")
    surname: str = Field(..., alias="Surname", min_length=1, description="Surname of the user")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": "3",
                "Firstname": "Maria",
                "Surname": "Virtanen",
            }
        },
    )

    def to_user(self) -> User:
        return User(id=self.id, first_name=self.first_name, surname=self.surname)


class UserUpdate(BaseModel):
    """Body of ``PUT /users/{user_id}``.

    Unknown keys are ignored, including ``id``: the path parameter always
    names the record.
    """

    first_name: str = Field(..., alias="Firstname", min_length=1, description="First name of the user")
    surname: str = Field(..., alias="Surname", min_length=1, description="Surname of the user")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "Firstname": "Louvre",
                "Surname": "Museum",
            }
        },
    )


class ErrorResponse(BaseModel):
    """Error body returned with every 4xx/5xx response."""

    error: str = Field(..., description="Human readable error message")
