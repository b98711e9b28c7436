import json

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from sheetwriter.config import get_settings
from sheetwriter.exceptions import CredentialsError
from sheetwriter.models.common import InvalidCredentialsResponse
from sheetwriter.models.sheets import SpreadsheetInfo, WriteRangeResponse

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def load_credentials(service_account_key: str) -> dict:
    """Parse the service account JSON and restore real newlines in the private key."""
    try:
        info = json.loads(service_account_key)
    except json.JSONDecodeError as e:
        raise _invalid_credentials() from e
    if not isinstance(info, dict):
        raise _invalid_credentials()
    if isinstance(info.get("private_key"), str):
        info["private_key"] = info["private_key"].replace("\\n", "\n")
    return info


def _invalid_credentials() -> CredentialsError:
    return CredentialsError(InvalidCredentialsResponse(
        message="Invalid GOOGLE_SERVICE_ACCOUNT_KEY format. Must be valid JSON.",
        help="Make sure your service account key is a single-line JSON object string.",
    ))


def authenticate(credentials_info: dict):
    """Build a Sheets v4 service for the service account, scoped to spreadsheets only."""
    creds = Credentials.from_service_account_info(credentials_info, scopes=SCOPES)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


def get_spreadsheet(service, spreadsheet_id: str) -> SpreadsheetInfo:
    """Get spreadsheet metadata: title, sheet names, URL."""
    result = service.spreadsheets().get(
        spreadsheetId=spreadsheet_id, includeGridData=False
    ).execute()
    sheets = [s["properties"]["title"] for s in result.get("sheets", [])]
    return SpreadsheetInfo(
        id=result.get("spreadsheetId", spreadsheet_id),
        title=result.get("properties", {}).get("title", ""),
        sheets=sheets,
        url=result.get("spreadsheetUrl", ""),
    )


def write_range(service, spreadsheet_id: str, range: str, values: list[list[str]]) -> WriteRangeResponse:
    """Write values to a fixed range of cells, replacing what is there."""
    result = service.spreadsheets().values().update(
        spreadsheetId=spreadsheet_id,
        range=range,
        valueInputOption=get_settings().value_input_option,
        body={"values": values},
    ).execute()
    return WriteRangeResponse(
        spreadsheet_id=spreadsheet_id,
        updated_range=result.get("updatedRange"),
        updated_rows=result.get("updatedRows", 0),
        updated_columns=result.get("updatedColumns", 0),
        updated_cells=result.get("updatedCells", 0),
    )


def append_rows(service, spreadsheet_id: str, range: str, values: list[list[str]]) -> WriteRangeResponse:
    """Append rows after the last row with data in the range."""
    result = service.spreadsheets().values().append(
        spreadsheetId=spreadsheet_id,
        range=range,
        valueInputOption=get_settings().value_input_option,
        insertDataOption="INSERT_ROWS",
        body={"values": values},
    ).execute()
    updates = result.get("updates", {})
    return WriteRangeResponse(
        spreadsheet_id=spreadsheet_id,
        updated_range=updates.get("updatedRange"),
        updated_rows=updates.get("updatedRows", 0),
        updated_columns=updates.get("updatedColumns", 0),
        updated_cells=updates.get("updatedCells", 0),
    )


def insert_row(service, spreadsheet_id: str, sheet_id: int, row_index: int) -> None:
    """Insert one blank row at a 0-based index on the sheet with the given sheetId."""
    service.spreadsheets().batchUpdate(
        spreadsheetId=spreadsheet_id,
        body={
            "requests": [{
                "insertDimension": {
                    "range": {
                        "sheetId": sheet_id,
                        "dimension": "ROWS",
                        "startIndex": row_index,
                        "endIndex": row_index + 1,
                    },
                    "inheritFromBefore": False,
                },
            }],
        },
    ).execute()
