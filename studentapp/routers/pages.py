from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from studentapp.routers.students import LIST_PATH

router = APIRouter(prefix="", tags=["pages"])


@router.get("/")
def home():
    return RedirectResponse(LIST_PATH, status_code=303)
