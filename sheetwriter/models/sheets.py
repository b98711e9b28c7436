from enum import Enum

from pydantic import BaseModel, Field, field_validator


class WriteMode(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"
    INSERT = "insert"


class SpreadsheetInfo(BaseModel):
    id: str
    title: str
    sheets: list[str]
    url: str


class WriteRangeResponse(BaseModel):
    spreadsheet_id: str
    updated_range: str | None
    updated_rows: int
    updated_columns: int
    updated_cells: int


class WriteSecrets(BaseModel):
    google_service_account_key: str | None = Field(default=None, alias="GOOGLE_SERVICE_ACCOUNT_KEY")

    model_config = {"populate_by_name": True}


class WriteRequest(BaseModel):
    """Payload of a write call. Presence is checked by the validator, not here."""

    sheet_id: str | None = None
    range: str | None = None
    summary: str | None = None
    mode: str | None = None
    secrets: WriteSecrets | None = None

    @field_validator("summary", mode="before")
    @classmethod
    def _scalar_summary_as_text(cls, value):
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def service_account_key(self) -> str | None:
        return self.secrets.google_service_account_key if self.secrets else None
