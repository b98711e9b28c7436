from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sheetwriter.models.sheets import WriteMode


class ResponseBody(BaseModel):
    """Base for JSON bodies returned by the write endpoint (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WriteSuccessResponse(ResponseBody):
    updated_range: str | None = None
    mode: WriteMode
    sheet_name: str | None = None
    timestamp: str


class MissingFieldsResponse(ResponseBody):
    error_code: Literal["missing_fields"] = "missing_fields"
    help: str
    missing: list[str]


class FieldRequiredResponse(ResponseBody):
    error_code: Literal["field_required"] = "field_required"
    help: str
    field: str


class InvalidModeResponse(ResponseBody):
    error_code: Literal["invalid_mode"] = "invalid_mode"
    help: str
    valid_modes: list[str]


class InvalidPayloadResponse(ResponseBody):
    error_code: Literal["invalid_payload"] = "invalid_payload"
    help: str
    fields: list[str]


class CredentialsNotConfiguredResponse(ResponseBody):
    error_code: Literal["credentials_not_configured"] = "credentials_not_configured"
    help: str
    setup_steps: list[str]


class InvalidCredentialsResponse(ResponseBody):
    error_code: Literal["invalid_credentials"] = "invalid_credentials"
    help: str


class AccessDeniedResponse(ResponseBody):
    error_code: Literal["access_denied"] = "access_denied"
    help: str
    solution: str
    service_account_email: str


class SheetNotFoundResponse(ResponseBody):
    error_code: Literal["sheet_not_found"] = "sheet_not_found"
    help: str
    solution: str


class InvalidRangeResponse(ResponseBody):
    error_code: Literal["invalid_range"] = "invalid_range"
    help: str
    examples: list[str]
    available_sheets: list[str]


class RemoteErrorResponse(ResponseBody):
    error_code: Literal["permission_denied", "not_found", "bad_request", "remote_error"]
    help: str | None = None
    code: int | None = None


ErrorBody = Annotated[
    Union[
        MissingFieldsResponse,
        FieldRequiredResponse,
        InvalidModeResponse,
        InvalidPayloadResponse,
        CredentialsNotConfiguredResponse,
        InvalidCredentialsResponse,
        AccessDeniedResponse,
        SheetNotFoundResponse,
        InvalidRangeResponse,
        RemoteErrorResponse,
    ],
    Field(discriminator="error_code"),
]
