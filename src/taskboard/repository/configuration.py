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
from taskboard.model.week_start import WEEK_START_OPTIONS, WeekStartType

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )
        if self._config is None:
            self._config = configuration.get_default_configuration()

        # Fill in settings added after the config file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

        if self._config["week_starts_on"] not in WEEK_START_OPTIONS:
            raise ValueError(
                f"Invalid week_starts_on in {configuration.APP_CONFIG_PATH}: "
                f"{self._config['week_starts_on']!r}"
            )
        logger.debug("Loaded configuration from %s", configuration.APP_CONFIG_PATH)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
        logger.debug("Saved configuration to %s", configuration.APP_CONFIG_PATH)

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        week_starts_on: Optional[WeekStartType] = None,
        hide_completed_in_calendar: Optional[bool] = None,
        default_space_id: Optional[str] = None,
        remove_default_space_id: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if week_starts_on is not None:
            if week_starts_on not in WEEK_START_OPTIONS:
                raise ValueError(f"Unknown week start: {week_starts_on!r}")
            self.config["week_starts_on"] = week_starts_on
        if hide_completed_in_calendar is not None:
            self.config["hide_completed_in_calendar"] = hide_completed_in_calendar
        if default_space_id is not None:
            self.config["default_space_id"] = default_space_id
        if remove_default_space_id:
            self.config["default_space_id"] = None
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
