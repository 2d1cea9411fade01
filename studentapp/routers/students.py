from __future__ import annotations

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from studentapp.schemas.student import NewStudentInput, StudentUpdateInput
from studentapp.services.student_service import StudentNotFoundError, StudentService

router = APIRouter(prefix="/Student", tags=["students"])

LIST_PATH = "/Student/List"


def _get_student_service(request: Request) -> StudentService:
    svc = getattr(getattr(request.app, "state", None), "student_service", None)
    if not svc:
        raise RuntimeError("StudentService not configured")
    return svc


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _redirect_to_list() -> RedirectResponse:
    return RedirectResponse(LIST_PATH, status_code=303)


def _load_or_404(request: Request, student_id: int):
    try:
        return _get_student_service(request).require_student(student_id)
    except StudentNotFoundError:
        raise HTTPException(404, "Student not found")


@router.get("/List", response_class=HTMLResponse)
def student_list(request: Request):
    students = _get_student_service(request).list_students()
    templates = _get_templates(request)
    return templates.TemplateResponse(request, "students/list.html", {"students": students})


@router.get("/Create", response_class=HTMLResponse)
def student_create_form(request: Request):
    templates = _get_templates(request)
    return templates.TemplateResponse(
        request,
        "students/form.html",
        {"student": None, "action": "/Student/Create", "title": "Create student"},
    )


@router.post("/Create")
def student_create(
    request: Request,
    full_name: str = Form(""),
    email: str = Form(""),
    course: str = Form(""),
    age: int = Form(...),
):
    data = NewStudentInput(full_name=full_name, email=email, course=course, age=age)
    _get_student_service(request).create_student(data)
    return _redirect_to_list()


@router.get("/Edit/{student_id}", response_class=HTMLResponse)
def student_edit_form(student_id: int, request: Request):
    student = _load_or_404(request, student_id)
    templates = _get_templates(request)
    return templates.TemplateResponse(
        request,
        "students/form.html",
        {"student": student, "action": "/Student/Edit", "title": "Edit student"},
    )


@router.post("/Edit")
def student_edit(
    request: Request,
    id: int = Form(...),
    full_name: str = Form(""),
    email: str = Form(""),
    course: str = Form(""),
    age: int = Form(...),
):
    data = StudentUpdateInput(id=id, full_name=full_name, email=email, course=course, age=age)
    _get_student_service(request).update_student(data)
    return _redirect_to_list()


@router.get("/Delete/{student_id}", response_class=HTMLResponse)
def student_delete_form(student_id: int, request: Request):
    student = _load_or_404(request, student_id)
    templates = _get_templates(request)
    return templates.TemplateResponse(request, "students/delete.html", {"student": student})


@router.post("/Delete")
def student_delete(request: Request, id: int = Form(...)):
    _get_student_service(request).delete_student(id)
    return _redirect_to_list()
