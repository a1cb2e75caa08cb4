# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field


class CredentialsRequestDTO(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(CredentialsRequestDTO):
    pass


class TokenPairDTO(BaseModel):
    access_token: str
    refresh_token: str


class MessageDTO(BaseModel):
    message: str
