import logging
from logging import StreamHandler, FileHandler, Logger
from pathlib import Path


class ModuleLogger:
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    # layout of the log records
    FORMATTER = logging.Formatter(
        '[%(process)s | %(name)s | %(levelname)s] %(message)s'
    )

    @classmethod
    def create_console_handler(cls, log_level: int | None = None) -> StreamHandler:
        handler = logging.StreamHandler()
        handler.setFormatter(cls.FORMATTER)
        handler.setLevel(log_level or cls.DEBUG)
        return handler

    @classmethod
    def create_file_handler(cls, file_path: Path | str, log_level: int | None = None) -> FileHandler:
        handler = logging.FileHandler(file_path, mode='a', encoding='utf-8')
        handler.setFormatter(cls.FORMATTER)
        handler.setLevel(log_level or cls.DEBUG)
        return handler

    @classmethod
    def get_logger(
        cls,
        logger_name: str,
        file_path: Path | str | None = None,
        log_level: int = logging.WARNING
    ) -> Logger:
        """Returns the logger named `logger_name`.

        The first time a name is requested, a console handler is attached to
        the logger (and a file handler too, if `file_path` is given). Asking
        for the same name again returns the existing logger without adding
        handlers a second time.

        Parameters
        ----------
        logger_name:
            Usually `__name__` of the calling module.
        file_path: optional
            File to which the log records are appended as well.
        log_level: default WARNING
            Records with a lower priority are not logged. The calculation
            modules report the default values they fall back on at DEBUG
            level.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            logger.addHandler(cls.create_console_handler(log_level))
            if file_path is not None:
                logger.addHandler(cls.create_file_handler(file_path, log_level))
            logger.setLevel(log_level)
        return logger

    @classmethod
    def set_level(cls, log_level: int, package: str = 'heatload') -> None:
        """Sets `log_level` on every logger (and its handlers) that was
        already created inside `package`.
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, Logger) and name.startswith(package):
                logger.setLevel(log_level)
                for handler in logger.handlers:
                    handler.setLevel(log_level)
