"""
Exceptions raised by API Contract Builder.
"""


class ApiContractError(Exception):
    """Base class for all API contract errors."""
    pass


class DuplicateEndpointError(ApiContractError, ValueError):
    """
    Raised when two endpoints of one API definition share method and path.

    Attributes:
        key: The colliding ``"<method> <path>"`` string.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate path '{key}'")


class LoaderError(ApiContractError):
    """Error while importing an API definition from a Python file."""
    pass
