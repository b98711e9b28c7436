"""Translate Sheets API failures into structured error responses."""

from googleapiclient.errors import HttpError

from sheetwriter.exceptions import SheetAccessError, SheetNotFoundError
from sheetwriter.models.common import (
    AccessDeniedResponse,
    RemoteErrorResponse,
    SheetNotFoundResponse,
)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while writing to Google Sheets."
SHARE_HELP = "Share the sheet with your service account email or make it publicly editable."
SHEET_URL_HELP = "Check the sheet ID in the URL: https://docs.google.com/spreadsheets/d/[SHEET_ID]/edit"


def error_code(error: Exception) -> int | None:
    """Remote numeric status of a failure, when it has one."""
    if isinstance(error, HttpError):
        return error.resp.status
    code = getattr(error, "code", None)
    return code if isinstance(code, int) else None


def _error_message(error: Exception) -> str:
    if isinstance(error, HttpError):
        return error.reason or str(error)
    return str(error)


def classify_api_error(error: Exception) -> tuple[int, RemoteErrorResponse]:
    """Map any failure raised while talking to the Sheets API to (status, body). Never retries."""
    code = error_code(error)
    if code == 403:
        return 403, RemoteErrorResponse(
            error_code="permission_denied",
            message="Permission denied. The service account cannot access this sheet.",
            help=f"{SHARE_HELP} The email is the client_email field of the service account JSON.",
            code=code,
        )
    if code == 404:
        return 404, RemoteErrorResponse(
            error_code="not_found",
            message="Sheet not found. The sheet ID is invalid or the sheet has been deleted.",
            help=SHEET_URL_HELP,
            code=code,
        )
    if code == 400:
        return 400, RemoteErrorResponse(
            error_code="bad_request",
            message="Invalid request. Check your range format.",
            help='Use A1 notation like "A1", "A1:B10", "Sheet1!A1" or a sheet name.',
            code=code,
        )
    return 500, RemoteErrorResponse(
        error_code="remote_error",
        message=_error_message(error) or UNKNOWN_ERROR_MESSAGE,
        code=code,
    )


def metadata_error(error: Exception) -> SheetAccessError | SheetNotFoundError | None:
    """Dedicated errors for a failed metadata fetch; None lets the generic path handle it."""
    code = error_code(error)
    if code == 403:
        return SheetAccessError(AccessDeniedResponse(
            message="Access denied to Google Sheet",
            help="The service account does not have access to this sheet.",
            solution=SHARE_HELP,
            service_account_email="Check your service account JSON for the client_email field",
        ))
    if code == 404:
        return SheetNotFoundError(SheetNotFoundResponse(
            message="Google Sheet not found",
            help="The sheet ID is invalid or the sheet has been deleted.",
            solution=SHEET_URL_HELP,
        ))
    return None
