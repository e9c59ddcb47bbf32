from freelancer_platform.models.user import User, ROLES
from freelancer_platform.models.freelancer import Freelancer, FREELANCER_STATUSES
from freelancer_platform.models.report import Report, REPORT_TYPES
from freelancer_platform.models.setting import Setting

__all__ = [
    "User",
    "ROLES",
    "Freelancer",
    "FREELANCER_STATUSES",
    "Report",
    "REPORT_TYPES",
    "Setting",
]
