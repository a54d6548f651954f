from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lifelog.domain.users.entities import AuthResult


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(extra="ignore")


class LoginRequestDTO(BaseModel):
    # Accepts either the username or the email address
    username: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(extra="ignore")


class UserDTO(BaseModel):
    id: int
    username: str
    email: str


class AuthSuccessDTO(BaseModel):
    token: str
    user: UserDTO

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthSuccessDTO:
        return cls(token=result.token.token, user=UserDTO(**result.account.to_dict()))
