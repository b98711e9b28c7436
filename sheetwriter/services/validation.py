from sheetwriter.exceptions import CredentialsError, RequestValidationError
from sheetwriter.models.common import (
    CredentialsNotConfiguredResponse,
    FieldRequiredResponse,
    InvalidModeResponse,
    MissingFieldsResponse,
)
from sheetwriter.models.sheets import WriteMode, WriteRequest

CREDENTIAL_FIELD = "secrets.GOOGLE_SERVICE_ACCOUNT_KEY"

FIELD_HELP = {
    "sheet_id": "Provide the Google Sheet ID from the URL: https://docs.google.com/spreadsheets/d/[SHEET_ID]/edit",
    "range": 'Use A1 notation like "Sheet1!A1" or "A1" for the first sheet',
    "summary": "Provide the data you want to write to the sheet",
}

SETUP_STEPS = [
    "1. Get your service account email from the client_email field of the JSON key",
    "2. Share your Google Sheet with that email as an Editor",
    "3. Set the JSON key as secrets.GOOGLE_SERVICE_ACCOUNT_KEY in the tool configuration",
]


def find_missing_fields(request: WriteRequest) -> list[str]:
    """Names of every required field that is absent or empty, in request order."""
    missing = [name for name in ("sheet_id", "range", "summary", "mode") if not getattr(request, name)]
    if not request.service_account_key:
        missing.append(CREDENTIAL_FIELD)
    return missing


def validate_request(request: WriteRequest) -> None:
    """Reject the request with one error listing all missing fields."""
    missing = find_missing_fields(request)
    if missing:
        raise RequestValidationError(MissingFieldsResponse(
            message=f"Missing required parameter(s): {', '.join(missing)}",
            help="Please provide all required parameters.",
            missing=missing,
        ))


def validate_fields(request: WriteRequest) -> None:
    """Per-field check run by the orchestrator itself, for callers that skip validate_request."""
    for name, hint in FIELD_HELP.items():
        if not getattr(request, name):
            raise RequestValidationError(FieldRequiredResponse(
                message=f"{name} is required",
                help=hint,
                field=name,
            ))
    if not request.service_account_key:
        raise CredentialsError(CredentialsNotConfiguredResponse(
            message="Google service account key not configured",
            help="Set GOOGLE_SERVICE_ACCOUNT_KEY in the tool secrets. "
                 "Make sure the sheet is shared with your service account email.",
            setup_steps=SETUP_STEPS,
        ))


def resolve_mode(mode: str | None) -> WriteMode:
    if not mode:
        return WriteMode.OVERWRITE
    try:
        return WriteMode(mode.strip().lower())
    except ValueError:
        valid = [m.value for m in WriteMode]
        raise RequestValidationError(InvalidModeResponse(
            message=f"Invalid mode: {mode}",
            help=f"Use one of: {', '.join(valid)}",
            valid_modes=valid,
        )) from None
