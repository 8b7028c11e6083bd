from __future__ import annotations

from pydantic import BaseModel, Field

from linkportal.domain.users.entities import User


class CredentialsDTO(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class UserDTO(BaseModel):
    id: int
    username: str

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(id=user.id, username=user.username)


class MessageDTO(BaseModel):
    message: str
