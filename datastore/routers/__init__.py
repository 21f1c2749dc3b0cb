"""
FastAPI routers.

Each module exposes an APIRouter included by ``datastore.app.create_app``.
"""
