"""Credentials posted to the ``authenticate`` endpoint to open a session."""

from typing import ClassVar

from pydantic import Field

from beeswax.resources.base import Resource


class Authenticate(Resource):
    NAME: ClassVar[str] = "authenticate"
    ID_FIELD: ClassVar[str] = "email"

    email: str
    password: str = Field(..., repr=False)
    account_id: int | None = Field(
        default=None,
        description="Multi-account users only: authenticate into another account on the same Buzz instance",
    )
    keep_logged_in: bool = Field(default=False, description="Keep the session alive for up to 30 days")

    @classmethod
    def simple(cls, email: str, password: str) -> "Authenticate":
        return cls(email=email, password=password)
