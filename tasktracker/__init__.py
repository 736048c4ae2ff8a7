# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Personal task tracker: accounts, signed session tokens and owner-scoped tasks."""

__version__ = "0.1.0"
