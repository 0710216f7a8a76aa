# account_service/schemas/user.py
"""
Pydantic schemas for the user endpoints.
Defines request models validated by the handlers and the public user shape
returned in responses.
"""
from pydantic import BaseModel, Field

from account_service.stores.base import UserFields, UserRecord

# Matches the CharField length of User.username / User.email
MAX_TEXT_LENGTH = 256


class RegisterIn(BaseModel):
    """
    Request model for account registration.
    All three fields are required and must be non-empty. Values are stored as given.
    """
    username: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    email: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    password: str = Field(min_length=1)  # Plain text, hashed by the store

    def to_fields(self) -> UserFields:
        return UserFields(username=self.username, email=self.email, password=self.password)


class UpdateUserIn(RegisterIn):
    """
    Request model for replacing a user's fields.
    Partial updates are not supported: username, email and password are all required.
    """


class LoginIn(BaseModel):
    """
    Request model for login.
    Contains the credential pair to verify.
    """
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    """
    User information returned in responses.
    Contains basic user details without the password hash.
    """
    id: str  # User unique identifier
    username: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserOut":
        return cls(id=record.id, username=record.username, email=record.email)
