from sheetwriter.models.common import ErrorBody


class WriteToolError(Exception):
    """Base for failures that are answered with a structured error body."""

    status_code = 500

    def __init__(self, body: ErrorBody):
        super().__init__(body.message)
        self.body = body


class RequestValidationError(WriteToolError):
    """Raised when required request fields are missing or malformed."""

    status_code = 400


class CredentialsError(WriteToolError):
    """Raised when the service account key is missing or not valid JSON."""

    status_code = 500


class SheetAccessError(WriteToolError):
    """Raised when the service account may not open the spreadsheet."""

    status_code = 403


class SheetNotFoundError(WriteToolError):
    """Raised when the spreadsheet id does not resolve to a spreadsheet."""

    status_code = 404


class RangeFormatError(WriteToolError):
    """Raised when the range matches none of the accepted A1 shapes."""

    status_code = 400
