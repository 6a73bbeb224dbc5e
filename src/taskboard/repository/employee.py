# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskboard import configuration
from taskboard.model.employee import Employee, EmployeeId

logger = logging.getLogger(__name__)


class EmployeeRepository:
    def __init__(self) -> None:
        self._employees: Optional[list[Employee]] = None
        self.is_dirty = False

    @property
    def employees(self) -> list[Employee]:
        if self._employees is None:
            self.__load_data()
        if self._employees is None:
            raise ValueError()
        return self._employees

    def __load_data(self) -> None:
        self._employees = []
        if not configuration.DATA_EMPLOYEES_PATH.is_file():
            return

        data = load(configuration.DATA_EMPLOYEES_PATH.read_text(), Loader=Loader)
        if data is None:
            return
        if not isinstance(data, dict) or not isinstance(data.get("employees"), list):
            raise ValueError(
                f"Expected an 'employees' list in {configuration.DATA_EMPLOYEES_PATH}"
            )

        for raw_employee in data["employees"]:
            self._employees.append(
                {
                    "id": str(raw_employee["id"]),
                    "name": raw_employee.get("name", ""),
                    "avatar_url": raw_employee.get("avatar_url"),
                }
            )
        logger.debug("Loaded %d employees", len(self._employees))

    def __save_data(self) -> None:
        data = {"employees": [dict(employee) for employee in self.employees]}
        configuration.DATA_EMPLOYEES_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_EMPLOYEES_PATH.write_text(
            dump(data, Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._employees is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def list_employees(self) -> list[Employee]:
        return deepcopy(self.employees)

    def get_employee(self, id: EmployeeId) -> Employee:
        for employee in self.employees:
            if employee["id"] == id:
                return deepcopy(employee)
        raise ValueError(f"No employee with id {id}")

    def upsert_employee(self, employee: Employee) -> Employee:
        self.is_dirty = True
        for index, existing in enumerate(self.employees):
            if existing["id"] == employee["id"]:
                self.employees[index] = deepcopy(employee)
                return deepcopy(employee)
        self.employees.append(deepcopy(employee))
        return deepcopy(employee)


EMPLOYEE_REPO = EmployeeRepository()
