from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from users_api.domain.user import User


class UserInfo(BaseModel):
    id: str = Field(default="", strict=True, description="Unique user identifier")
    name: str = Field(default="", strict=True, description="Display name")
    age: int = Field(default=0, strict=True, description="Age")

    @model_validator(mode="before")
    @classmethod
    def null_body(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("id", "name", "age", mode="before")
    @classmethod
    def null_field(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null leaves the zero value in place
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def from_domain(cls, user: User) -> "UserInfo":
        return cls(id=user.id, name=user.name, age=user.age)

    def to_domain(self) -> User:
        return User(id=self.id, name=self.name, age=self.age)


class MessageResponse(BaseModel):
    message: str


def new_json_response(message: str) -> bytes:
    return MessageResponse(message=message).model_dump_json().encode("utf-8")
