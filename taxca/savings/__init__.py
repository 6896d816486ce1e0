from taxca.savings.limits import (
    LIMITS_2025,
    QESI_2025,
    cesg_grant,
    qesi_grant,
    rrsp_deduction_limit,
    tfsa_room,
)
from taxca.savings.tuition import TUITION_FEES, tuition_fees

__all__ = [
    "LIMITS_2025",
    "QESI_2025",
    "TUITION_FEES",
    "cesg_grant",
    "qesi_grant",
    "rrsp_deduction_limit",
    "tfsa_room",
    "tuition_fees",
]
