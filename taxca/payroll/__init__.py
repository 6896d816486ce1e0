from taxca.payroll.insurance import ei_premium, qpip_premium
from taxca.payroll.pension import pension_contributions, plan_for

__all__ = ["ei_premium", "pension_contributions", "plan_for", "qpip_premium"]
