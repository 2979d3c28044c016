from pydantic import BaseModel, Field, field_validator


class RenderContext(BaseModel):
    """Values substituted into the greeting page for one request."""

    name: str = Field(..., min_length=1, description="Effective name shown in the greeting")
    now: str = Field(..., description="Server-local timestamp, formatted %Y-%m-%d %H:%M:%S")
    server_info: str = Field(..., description="Host server description")
    servlet_name: str = Field(..., description="Dotted path of the handling endpoint")
    method: str = Field(..., description="HTTP request method")
    request_uri: str = Field(..., description="Request path without the query string")

    @field_validator("name", mode="after")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names; the value itself is kept untrimmed."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v
