from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Тело POST/PUT запроса. Поля необязательны, пустые значения проверяются в сервисе"""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = Field(None, validation_alias=AliasChoices("username", "userName"))
    group_id: Optional[int] = Field(None, alias="groupId")


class LoginRequest(BaseModel):
    username: Optional[str] = Field(None, validation_alias=AliasChoices("userName", "username"))
    password: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    username: str = Field(alias="userName")
    group_id: Optional[int] = Field(None, alias="groupId")
    group: Optional[str] = None


class UsernameAvailability(BaseModel):
    available: bool


def to_user_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        username=user.username,
        group_id=user.group_id,
        group=user.group_name,
    )
