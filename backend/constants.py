"""
Application-wide constants.

This module centralizes the magic numbers shared by the model, the DTOs and
the API layer.
"""


class OwnerFieldLength:
    """Maximum lengths of the owner text columns"""

    FIRST_NAME = 30
    LAST_NAME = 30
    ADDRESS = 255
    CITY = 80
    TELEPHONE = 20


class ServerConfig:
    """Server configuration constants"""

    HOST = "127.0.0.1"
    PORT = 8080

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
