# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .misc_controller import MiscController
from .quotes_controller import QuotesController
from .resources_controller import OwnedResourceController

__all__ = [
    "AuthController",
    "MiscController",
    "OwnedResourceController",
    "QuotesController",
]
