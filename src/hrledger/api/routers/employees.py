"""Employee endpoints."""
from fastapi import APIRouter, Depends, Query, Response
from hrledger.api.deps import get_uow
from hrledger.api.schemas.attendance import AttendanceList
from hrledger.api.schemas.employees import EmployeeCreate, EmployeeList, EmployeeRead, EmployeeUpdate
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.employees_service import EmployeesService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeList)
def list_employees(uow: UnitOfWork = Depends(get_uow)) -> EmployeeList:
    return EmployeesService(uow).list_employees()


@router.post("", response_model=EmployeeRead, status_code=201)
def create_employee(payload: EmployeeCreate, uow: UnitOfWork = Depends(get_uow)) -> EmployeeRead:
    return EmployeesService(uow).create_employee(payload)


@router.get("/{employee_id}", response_model=EmployeeRead)
def get_employee(employee_id: int, uow: UnitOfWork = Depends(get_uow)) -> EmployeeRead:
    return EmployeesService(uow).get_employee(employee_id)


@router.patch("/{employee_id}", response_model=EmployeeRead)
def update_employee(
    employee_id: int, payload: EmployeeUpdate, uow: UnitOfWork = Depends(get_uow),
) -> EmployeeRead:
    return EmployeesService(uow).update_employee(employee_id, payload)


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    EmployeesService(uow).delete_employee(employee_id)
    return Response(status_code=204)


@router.get("/{employee_id}/attendance", response_model=AttendanceList)
def list_employee_attendance(
    employee_id: int,
    month: str | None = Query(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$"),
    uow: UnitOfWork = Depends(get_uow),
) -> AttendanceList:
    return EmployeesService(uow).list_attendance(employee_id, month)
