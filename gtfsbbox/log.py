import logging
import logging.config
from pathlib import Path
import yaml

DEFAULT_LOG_YAML = Path(__file__).parent / "logging_config.yaml"
ROOT_LOGGER_NAME = "gtfsbbox"

class ColorFormatter(logging.Formatter):
    COLORS = {
        'ERROR': '\033[1;31m',  # Bold red
        'RESET': '\033[0m',  # Reset color
    }

    def format(self, record):
        original_msg = record.msg
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        record.msg = f"{color}{record.msg}{self.COLORS['RESET']}"
        formatted = super().format(record)
        record.msg = original_msg
        return formatted

class CustomLogger:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(CustomLogger, cls).__new__(cls)
            cls._instance._setup_logger()
        return cls._instance

    def _setup_logger(self):
        with open(DEFAULT_LOG_YAML, 'r', encoding="UTF-8") as file:
            config = yaml.safe_load(file)
            logging.config.dictConfig(config)

        for logger_name in config['loggers']:
            logger = logging.getLogger(logger_name)

            # colors only make sense on a terminal
            for handler in logger.handlers:
                if isinstance(handler, logging.FileHandler):
                    continue
                if isinstance(handler, logging.StreamHandler) and _is_tty(handler.stream):
                    handler.setFormatter(ColorFormatter(handler.formatter._fmt, handler.formatter.datefmt))

    def get_logger(self, logger_name: str) -> logging.Logger:
        """Return a logger below the package logger, so it shares its handlers."""
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{logger_name}")

    def set_level(self, level: int):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


LOGGER = CustomLogger()
