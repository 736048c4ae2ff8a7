# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase, validate_registration

__all__ = ["LoginUserUseCase", "RegisterUserUseCase", "validate_registration"]
