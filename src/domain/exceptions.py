"""
Domain Exceptions

Raised by adapters for conditions the application layer must translate
into a business error.
"""


class DuplicateEmailError(Exception):
    """A user with this email already exists"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")
