from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from pacrecords.application import get_records_service

router = APIRouter(prefix="/pacrecords", tags=["records"])


@router.get("/GetRecords.php")
async def get_records(request: Request) -> list[Any]:
    service = get_records_service()
    return service.get_records(request.query_params)
