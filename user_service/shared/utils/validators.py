# 📄 File: user_service/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# This file contains the checkers that make sure the data typed in for a user is correct,
# like verifying an email has an @ sign, a phone number looks like (555) 555-5555,
# and a password is strong enough.
# 🧪 Purpose (Technical Summary):
# Field-level validation predicates for user records built on module-level compiled
# patterns; each check is a pure function returning a bool.
# 🔗 Dependencies:
# re
# 🔄 Connected Modules / Calls From:
# User domain model (aggregate validation), credential engine (password policy)

import re

# Contact validation patterns
US_PHONE_PATTERN = re.compile(r'^\(\d{3}\) \d{3}-\d{4}(\s?x\d{1,5})?$', re.ASCII)

# Username validation constants
USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 25
USERNAME_ILLEGAL_PATTERN = re.compile(r'[^a-zA-Z0-9]')

# Password validation patterns
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 25
PASSWORD_SPECIAL_CHARS = "!@#$%&?+.,*^-_=<>[](){}"
_SPECIAL_CLASS = re.escape(PASSWORD_SPECIAL_CHARS)
PASSWORD_PATTERNS = {
    'uppercase': re.compile(r'[A-Z]'),
    'lowercase': re.compile(r'[a-z]'),
    'digit': re.compile(r'[0-9]'),
    'special': re.compile(f'[{_SPECIAL_CLASS}]'),
}
PASSWORD_ILLEGAL_PATTERN = re.compile(f'[^a-zA-Z0-9{_SPECIAL_CLASS}]')

PASSWORD_POLICY_MESSAGE = (
    f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters, "
    "contain upper and lower case, at least one number, and at least one symbol from "
    f"{PASSWORD_SPECIAL_CHARS}"
)


# ==============================================================================
# EMAIL AND CONTACT VALIDATION
# ==============================================================================

def validate_email(email: str) -> bool:
    """
    Validate an email address.

    Only checks that the address has exactly one @ separator; anything
    stricter is left to delivery.
    """
    return len(email.split("@")) == 2


def validate_telephone(phone: str) -> bool:
    """
    Validate a North American phone number of the form (###) ###-####,
    optionally followed by an extension x##### with an optional space.
    """
    return US_PHONE_PATTERN.fullmatch(phone) is not None


# ==============================================================================
# ACCOUNT VALIDATION
# ==============================================================================

def validate_username(username: str) -> bool:
    """Usernames are 5-25 characters, alphanumeric only."""
    if USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return USERNAME_ILLEGAL_PATTERN.search(username) is None

    return False


def validate_password(password: str) -> bool:
    """
    Validate a plaintext password against the password policy.

    Args:
        password: Plaintext password to check

    Returns:
        True if the password is 8-25 characters long, contains an uppercase
        letter, a lowercase letter, a digit and one of the allowed symbols,
        and contains nothing outside letters, digits and those symbols.
    """
    if len(password) < PASSWORD_MIN_LENGTH or len(password) > PASSWORD_MAX_LENGTH:
        return False

    for pattern in PASSWORD_PATTERNS.values():
        if not pattern.search(password):
            return False

    if PASSWORD_ILLEGAL_PATTERN.search(password):
        return False

    return True
