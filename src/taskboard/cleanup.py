# SPDX-License-Identifier: MIT

import atexit

from taskboard.repository.configuration import CONFIGURATION_REPO
from taskboard.repository.employee import EMPLOYEE_REPO
from taskboard.repository.task import TASK_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()
    EMPLOYEE_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
