import functools
import logging
import logging.handlers
import os
from specparse.ReadConfig import ReadConfig as rc
from specparse.errors import SpecError
from specparse.singleton import Singleton


class _LogKCld:
    """
    Shared application logger.

    Configured once from the ``logging`` section of config.json:
      - name:     logger name (default 'specparse')
      - level:    level name for both handlers
      - format:   record format
      - log_file: optional path; adds a rotating file handler
    """

    def __init__(self) -> None:
        log_config = rc().logging_config
        self.logger = logging.getLogger(log_config['name'])
        self.logger.setLevel(log_config['level'].upper())
        self.logger.propagate = True

        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        formatter = logging.Formatter(log_config['format'])
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        self.logger.addHandler(stream_handler)

        log_file = log_config.get('log_file')
        if log_file:
            log_file = os.path.abspath(os.path.expanduser(log_file))
            os.makedirs(os.path.dirname(log_file), exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def __getattr__(self, item):
        # debug/info/warning/error/exception/... go straight to the logger
        if item == 'logger':
            raise AttributeError(item)
        return getattr(self.logger, item)


class LogKCld(_LogKCld, metaclass=Singleton):
    pass


def log_to_file(logger):
    """
    Decorator: trace calls at DEBUG and log failures before re-raising.

    Rejected user input (SpecError) is logged at INFO, anything else with
    a traceback.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__qualname__} args={args!r} kwargs={kwargs!r}")
            try:
                result = func(*args, **kwargs)
            except SpecError as e:
                logger.info(f"{func.__qualname__} rejected input: {e}")
                raise
            except Exception:
                logger.exception(f"{func.__qualname__} failed")
                raise
            logger.debug(f"{func.__qualname__} returned {result!r}")
            return result
        return wrapper
    return decorator
