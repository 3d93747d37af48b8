from typing import Annotated

from pydantic import ConfigDict, Field, StringConstraints, field_validator

from concert_manager.dto import BaseSchema

# bcrypt only accepts the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

Trimmed = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CredentialsSchema(BaseSchema):
    """Passwords are taken verbatim; only the identifying fields are trimmed."""

    model_config = ConfigDict(str_strip_whitespace=False)


class AttendeeRegister(CredentialsSchema):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    contact_info: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    password: str = Field(min_length=1)
    phone: Annotated[str, StringConstraints(strip_whitespace=True, max_length=30)] | None = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value

class AttendeeLogin(CredentialsSchema):
    contact_info: Trimmed
    password: str = Field(min_length=1)

class RegisteredAttendee(BaseSchema):
    id: int
    name: str
    contact_info: str

class AttendeeProfile(RegisteredAttendee):
    loyalty_points: int

class AttendeeLoginResponse(BaseSchema):
    message: str
    attendee: AttendeeProfile


class AdminLogin(CredentialsSchema):
    username: Trimmed
    password: str = Field(min_length=1)

class AdminLoginResponse(BaseSchema):
    success: bool = True
    admin_id: int
    username: str
