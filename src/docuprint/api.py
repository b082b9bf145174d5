from fastapi import APIRouter

from docuprint.modules.admins import router as admin_auth_router
from docuprint.modules.directory import router as directory_router
from docuprint.modules.notifications import router as notifications_router
from docuprint.modules.otp import router as otp_router
from docuprint.modules.print_jobs import admin_router as admin_print_jobs_router
from docuprint.modules.print_jobs import router as print_jobs_router
from docuprint.modules.residents.router import router as residents_router
from docuprint.modules.signups import admin_router as admin_signups_router
from docuprint.modules.signups import router as signups_router

api_router = APIRouter()

api_router.include_router(directory_router, tags=["Directory"])

api_router.include_router(signups_router, tags=["Signups"])

api_router.include_router(otp_router, prefix="/auth", tags=["Resident Auth"])

api_router.include_router(residents_router, tags=["Residents"])

api_router.include_router(print_jobs_router, prefix="/print-jobs", tags=["Print Jobs"])

api_router.include_router(admin_auth_router, prefix="/admin", tags=["Admin - Session"])

api_router.include_router(
    admin_signups_router,
    prefix="/admin/signups",
    tags=["Admin - Signups"],
)

api_router.include_router(
    admin_print_jobs_router,
    prefix="/admin/print-jobs",
    tags=["Admin - Print Jobs"],
)

api_router.include_router(
    notifications_router,
    prefix="/admin/notifications",
    tags=["Admin - Notifications"],
)
