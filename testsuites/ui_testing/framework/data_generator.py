"""
================================================================================
Test Data Generator
================================================================================

Synthetic field values for registration and login scenarios.

Every function is independent and total over its documented parameter
range; the only inputs are process time and randomness.

================================================================================
"""

import random
import string
import threading
import time
from typing import List


PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$"
ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

EMAIL_DOMAIN = "invalid.com"

FIRST_NAMES: List[str] = [
    "John", "Jane", "Mike", "Sarah", "David",
    "Emma", "Chris", "Lisa", "Robert", "Maria",
]
LAST_NAMES: List[str] = [
    "Smith", "Johnson", "Williams", "Brown", "Jones",
    "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
]

INVALID_EMAILS: List[str] = ["amotoori", "amotoori@", "amotoori@gmail", "amotoori@gmail."]
INVALID_PHONES: List[str] = ["111", "abcde", "12"]

# Emails embed a millisecond stamp; keep it strictly increasing so that
# calls inside the same millisecond still yield distinct addresses.
_clock_lock = threading.Lock()
_last_millis = 0


def _unique_millis() -> int:
    global _last_millis
    with _clock_lock:
        now = int(time.time() * 1000)
        _last_millis = max(now, _last_millis + 1)
        return _last_millis


class DataGenerator:
    """Static helpers producing synthetic test inputs."""

    @staticmethod
    def generate_random_email() -> str:
        """testuser_<unixMillis>_<0-9999>@invalid.com, unique per process."""
        random_part = random.randint(0, 9999)
        return f"testuser_{_unique_millis()}_{random_part}@{EMAIL_DOMAIN}"

    @staticmethod
    def generate_random_password(length: int = 12) -> str:
        """
        Random password drawn uniformly from PASSWORD_ALPHABET.

        Args:
            length: Password length; zero or negative gives an empty string
        """
        return "".join(random.choices(PASSWORD_ALPHABET, k=max(length, 0)))

    @staticmethod
    def generate_random_string(length: int = 8) -> str:
        return "".join(random.choices(ALPHANUMERIC, k=max(length, 0)))

    @staticmethod
    def generate_special_characters() -> str:
        return SPECIAL_CHARACTERS

    @staticmethod
    def generate_random_number(min_value: int = 1, max_value: int = 1000) -> int:
        """Random integer in [min_value, max_value]; bounds may be given in any order."""
        low, high = sorted((min_value, max_value))
        return random.randint(low, high)

    @staticmethod
    def generate_random_first_name() -> str:
        return random.choice(FIRST_NAMES)

    @staticmethod
    def generate_random_last_name() -> str:
        return random.choice(LAST_NAMES)

    @staticmethod
    def generate_random_phone() -> str:
        """10-digit phone number: area (3) + exchange (3) + line (4)."""
        area_code = random.randint(100, 999)
        middle = random.randint(100, 999)
        last = random.randint(1000, 9999)
        return f"{area_code}{middle}{last}"

    @staticmethod
    def generate_invalid_email() -> str:
        return random.choice(INVALID_EMAILS)

    @staticmethod
    def generate_invalid_phone() -> str:
        return random.choice(INVALID_PHONES)


__all__ = [
    "DataGenerator",
    "PASSWORD_ALPHABET",
    "FIRST_NAMES",
    "LAST_NAMES",
    "INVALID_EMAILS",
    "INVALID_PHONES",
]
