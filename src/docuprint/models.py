"""
Model registry.

Importing this module registers every table on Base.metadata.
"""

from docuprint.modules.admins.models import AdminAccount
from docuprint.modules.notifications.models import AdminNotification
from docuprint.modules.otp.models import OtpEntry
from docuprint.modules.print_jobs.models import ColorMode, PaperSize, PrintJob, PrintJobStatus
from docuprint.modules.residents.models import ResidentProfile
from docuprint.modules.signups.models import ResidentSignupRequest, SignupStatus

__all__ = [
    "AdminAccount",
    "AdminNotification",
    "ColorMode",
    "OtpEntry",
    "PaperSize",
    "PrintJob",
    "PrintJobStatus",
    "ResidentProfile",
    "ResidentSignupRequest",
    "SignupStatus",
]
