# app/errors.py


class ForbiddenInProduction(Exception):
    """Raised when an admin operation is invoked on a production deployment."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is disabled in production")
