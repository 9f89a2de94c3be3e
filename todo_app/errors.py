from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """An error that knows which HTTP status it should be reported with."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status


def error_status(err: Exception) -> int:
    if isinstance(err, ApiError):
        return err.status
    if isinstance(err, HTTPException) and err.code:
        return err.code
    return 500


def error_payload(err: Exception, status: int) -> dict:
    if isinstance(err, HTTPException):
        message = err.description
    else:
        message = str(err) or err.__class__.__name__
    return {"error": {"message": message, "status": status}}
