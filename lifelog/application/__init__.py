# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.resources import ManageOwnedResourceUseCase
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "LoginUserUseCase",
    "ManageOwnedResourceUseCase",
    "RegisterUserUseCase",
]
