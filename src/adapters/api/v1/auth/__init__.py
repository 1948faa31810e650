"""Authentication API routes.

Mounts the register, login, forgot-password and profile endpoints under ``/auth``.
"""

from fastapi import APIRouter

from .routes.forgot_password import router as forgot_password_router
from .routes.login import router as login_router
from .routes.profile import router as profile_router
from .routes.register import router as register_router

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(register_router, prefix="/register")
router.include_router(login_router, prefix="/login")
router.include_router(forgot_password_router, prefix="/forgot-password")
router.include_router(profile_router)
