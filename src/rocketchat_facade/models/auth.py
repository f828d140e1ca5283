"""Login payload models."""

from pydantic import AliasPath, BaseModel, ConfigDict, Field, model_validator


class AuthenticatedUser(BaseModel):
    """Profile of the account the facade is logged in as."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, validation_alias="_id")
    username: str | None = None
    name: str | None = None  # Display name
    email: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _first_email(cls, data):
        # Rocket.Chat sends "emails": [{"address": ..., "verified": ...}]
        if isinstance(data, dict) and "email" not in data and data.get("emails"):
            first = data["emails"][0]
            if isinstance(first, dict) and "address" in first:
                data = {**data, "email": first["address"]}
        return data


class AuthResult(BaseModel):
    """Result of a successful ``/login`` exchange."""

    model_config = ConfigDict(populate_by_name=True)

    status: str | None = None
    auth_token: str = Field(min_length=1, validation_alias=AliasPath("data", "authToken"))
    user_id: str = Field(min_length=1, validation_alias=AliasPath("data", "userId"))
    me: AuthenticatedUser | None = Field(default=None, validation_alias=AliasPath("data", "me"))
