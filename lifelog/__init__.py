# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Personal-development tracker backend."""

__version__ = "0.1.0"
