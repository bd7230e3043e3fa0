"""User record held by the data store."""

from dataclasses import dataclass


@dataclass
class User:
    """Credential record. Not used by the booking flow."""

    id: str
    username: str
    password: str
