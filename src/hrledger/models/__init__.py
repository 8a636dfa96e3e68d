from hrledger.models.core import AttendanceRecord, CurrencyRate, Employee
from hrledger.models.finance import (
    AdRevenue, ConsultantContract, ContractEmployeeLink, Cost, IapRevenue,
)

__all__ = [
    "Employee", "AttendanceRecord", "CurrencyRate",
    "ConsultantContract", "ContractEmployeeLink", "AdRevenue", "IapRevenue", "Cost",
]
