# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from taskboard.model.week_start import WeekStartType

APP_NAME = "taskboard"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_EMPLOYEES_PATH: Path = DATA_PATH / "employees.yaml"


class Configuration(TypedDict):
    show_header: bool
    week_starts_on: WeekStartType
    hide_completed_in_calendar: bool
    default_space_id: Optional[str]
    data_path: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "week_starts_on": "sunday",
        "hide_completed_in_calendar": False,
        "default_space_id": None,
        "data_path": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_EMPLOYEES_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_EMPLOYEES_PATH = DATA_PATH / "employees.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
