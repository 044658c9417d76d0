"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the storefront account screens.

Each page class encapsulates:
    - Element locators (declarative, re-resolved on use)
    - Page-specific queries
    - Transition workflows returning the next Page Object

Importing this package registers every screen with the state machine in
`framework.page_base`.

Author: Automation Team
License: MIT
================================================================================
"""

from .forgotten_password_page import ForgottenPasswordPage
from .home_page import HomePage
from .login_page import LoginPage
from .register_page import RegisterPage, RegistrationData

__all__ = [
    "ForgottenPasswordPage",
    "HomePage",
    "LoginPage",
    "RegisterPage",
    "RegistrationData",
]
