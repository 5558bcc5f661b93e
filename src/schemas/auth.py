"""Authentication schemas."""

from pydantic import BaseModel, Field, field_validator

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class UserSignup(BaseModel):
    """User signup request."""

    username: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserSignin(BaseModel):
    """User signin request."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""

    token: str


class MessageResponse(BaseModel):
    message: str
