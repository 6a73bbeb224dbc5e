# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

type EmployeeId = str


class Employee(TypedDict):
    id: EmployeeId
    name: str
    avatar_url: Optional[str]
