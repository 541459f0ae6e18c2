"""Errors raised for invalid client requests."""


class ClientError(Exception):
    """An error carrying an HTTP-style status code and a message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"Error {self.status_code}: {self.message}"