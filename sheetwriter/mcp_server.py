from fastmcp import FastMCP

from sheetwriter.models.sheets import WriteRequest, WriteSecrets
from sheetwriter.services import writer as writer_service

mcp = FastMCP("Sheetwriter")


@mcp.tool
def sheets_write(
    sheet_id: str,
    range: str,
    summary: str,
    service_account_key: str,
    mode: str = "overwrite",
) -> dict:
    """Write a text value to a Google Sheet using a service account.
    range is A1 notation ("A1", "A1:B10", "Sheet1!A1") or a sheet name ("Tasks") for append mode.
    mode is "overwrite" (replace the cells), "append" (add a row after the last row with data)
    or "insert" (insert a blank row at the range's row, then write into it).
    service_account_key is the service account JSON key; share the sheet with its client_email first.
    Returns the HTTP-style status and either the updated range or an error with guidance."""
    request = WriteRequest(
        sheet_id=sheet_id,
        range=range,
        summary=summary,
        mode=mode,
        secrets=WriteSecrets(google_service_account_key=service_account_key),
    )
    status, body = writer_service.handle_write_request(request)
    return {"status": status, **body}
