"""
FastAPI routers grouped by concern (students, pages).

Each module exposes an APIRouter that is included by the application factory
in app.py.
"""
