from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sheetwriter.models.sheets import WriteRequest
from sheetwriter.services import writer as writer_service

router = APIRouter(tags=["write"])


@router.post("/write")
def write(request: WriteRequest) -> JSONResponse:
    status, body = writer_service.handle_write_request(request)
    return JSONResponse(status_code=status, content=body)
