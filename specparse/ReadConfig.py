import json
import logging
import os
from specparse.singleton import Singleton

CONFIG_DIR_ENV = "SPECPARSE_CONFIG_DIR"

DEFAULT_LOGGING = {
    "name": "specparse",
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "log_file": None,
}
DEFAULT_DEVICE = {"device_root": "/dev/"}
DEFAULT_NAMESPACE = {"pod": "pod", "ns_prefix": "ns"}

# stdlib logger: logpkg itself is configured from this class
_log = logging.getLogger(__name__)


class _ReadConfig:

    def __init__(self, base_dir=None) -> None:
        if base_dir is None:
            base_dir = os.environ.get(CONFIG_DIR_ENV)
        if base_dir is not None:
            self.base_dir = os.path.join(base_dir, 'config')
        else:
            self.base_dir = 'config/'

        self.file_path = os.path.join(self.base_dir, 'config.json')
        self._config_data = {}
        self.load_config()

    @property
    def set_config_dir(self) -> str:
        return self.base_dir

    def load_config(self) -> None:
        try:
            with open(self.file_path, 'r') as file:
                data = json.load(file)
        except FileNotFoundError:
            _log.debug(f"no config at {self.file_path}, using defaults")
            return
        except (OSError, json.JSONDecodeError) as e:
            _log.warning(f"file open error {self.file_path}: {e}")
            return
        if not isinstance(data, dict):
            _log.warning(f"config {self.file_path} is not a JSON object, ignoring")
            return
        self._config_data = data

    def _section(self, name: str, defaults: dict) -> dict:
        section = self._config_data.get(name) or {}
        if not isinstance(section, dict):
            _log.warning(f"config section {name!r} is not an object, using defaults")
            return dict(defaults)
        # null values keep the default
        return {**defaults, **{k: v for k, v in section.items() if v is not None}}

    @property
    def logging_config(self) -> dict:
        return self._section('logging', DEFAULT_LOGGING)

    @property
    def device_config(self) -> dict:
        return self._section('device', DEFAULT_DEVICE)

    @property
    def namespace_config(self) -> dict:
        return self._section('namespace', DEFAULT_NAMESPACE)


class ReadConfig(_ReadConfig, metaclass=Singleton):
    pass
