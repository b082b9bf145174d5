"""
Shared module - model base and schema helpers used by every feature module.
"""

from docuprint.modules.shared.models import BaseModel, utcnow
from docuprint.modules.shared.schemas import CamelModel, DataResponse

__all__ = ["BaseModel", "CamelModel", "DataResponse", "utcnow"]
