"""Validate a write request, pick a write strategy and run it against Google Sheets."""

import logging
from datetime import datetime, timezone

from googleapiclient.errors import HttpError

from sheetwriter.exceptions import WriteToolError
from sheetwriter.models.common import ErrorBody, WriteSuccessResponse
from sheetwriter.models.sheets import SpreadsheetInfo, WriteMode, WriteRangeResponse, WriteRequest
from sheetwriter.services import errors
from sheetwriter.services import ranges
from sheetwriter.services import sheets as sheets_service
from sheetwriter.services import validation

logger = logging.getLogger(__name__)

# Insert mode always targets the first sheet. A sheet qualifier in the range is
# not resolved to its sheetId, so "Data!A5" inserts the blank row on sheet 0.
DEFAULT_SHEET_ID = 0


def _fetch_metadata(service, spreadsheet_id: str) -> SpreadsheetInfo:
    try:
        return sheets_service.get_spreadsheet(service, spreadsheet_id)
    except HttpError as e:
        mapped = errors.metadata_error(e)
        if mapped is not None:
            raise mapped from e
        raise


def _overwrite(service, spreadsheet_id: str, range: str, value: str) -> WriteRangeResponse:
    return sheets_service.write_range(service, spreadsheet_id, range, [[value]])


def _append(service, spreadsheet_id: str, range: str, value: str) -> WriteRangeResponse:
    return sheets_service.append_rows(service, spreadsheet_id, ranges.append_target(range), [[value]])


def _insert(service, spreadsheet_id: str, range: str, value: str) -> WriteRangeResponse:
    row_number = ranges.insert_row_number(range)
    logger.info("Inserting blank row %d on sheet %d", row_number, DEFAULT_SHEET_ID)
    sheets_service.insert_row(service, spreadsheet_id, DEFAULT_SHEET_ID, row_number - 1)
    return sheets_service.write_range(service, spreadsheet_id, range, [[value]])


_STRATEGIES = {
    WriteMode.OVERWRITE: _overwrite,
    WriteMode.APPEND: _append,
    WriteMode.INSERT: _insert,
}


def write_to_sheet(request: WriteRequest) -> WriteSuccessResponse:
    """Run one write request end to end.

    Raises a WriteToolError for validation, credential and metadata problems.
    Failures of the write itself propagate as raised by the API client.
    """
    validation.validate_fields(request)
    mode = validation.resolve_mode(request.mode)

    credentials = sheets_service.load_credentials(request.service_account_key)
    logger.debug("Credentials loaded for %s", credentials.get("client_email", "<no client_email>"))

    service = sheets_service.authenticate(credentials)
    info = _fetch_metadata(service, request.sheet_id)
    logger.debug("Spreadsheet %r has sheets %s", info.title, info.sheets)

    shape = ranges.validate_range(request.range, info.sheets)
    if mode is WriteMode.APPEND and shape is ranges.RangeShape.SHEET_CELL:
        logger.info(
            "Converting range %r to sheet name %r for append mode",
            request.range, ranges.append_target(request.range),
        )

    result = _STRATEGIES[mode](service, request.sheet_id, request.range, request.summary)
    logger.info("Wrote to %s (%s mode), updated range %s", request.sheet_id, mode.value, result.updated_range)

    return WriteSuccessResponse(
        message=f"Successfully wrote data to Google Sheet using {mode.value} mode.",
        updated_range=result.updated_range,
        mode=mode,
        sheet_name=info.sheets[0] if info.sheets else None,
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )


def handle_write_request(request: WriteRequest) -> tuple[int, dict]:
    """Entry point for transports: returns (status code, JSON body) and never raises."""
    logger.info("Write request: sheet_id=%s range=%s mode=%s", request.sheet_id, request.range, request.mode)
    body: WriteSuccessResponse | ErrorBody
    try:
        validation.validate_request(request)
        body = write_to_sheet(request)
        status = 200
    except WriteToolError as e:
        logger.warning("Write rejected (%d): %s", e.status_code, e)
        status, body = e.status_code, e.body
    except Exception as e:
        status, body = errors.classify_api_error(e)
        if status >= 500:
            logger.exception("Write to %s failed", request.sheet_id)
        else:
            logger.warning("Write to %s failed (%d): %s", request.sheet_id, status, body.message)
    return status, body.to_json_dict()
