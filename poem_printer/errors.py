class PrinterError(Exception):
    """Base class for every failure a workflow can report to the user."""


class ValidationError(PrinterError, ValueError):
    pass


class HttpError(PrinterError):
    def __init__(self, status: int, message: str = ""):
        self.status = status
        super().__init__(message or f"کد خطا {status}")


class NetworkError(PrinterError):
    pass


class ParseError(PrinterError):
    pass


class EnrichmentFailure(PrinterError):
    """Poet lookup failed; callers fall back to the default label."""
