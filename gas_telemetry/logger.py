import json
import logging
import os

# Define ANSI escape sequences for colors
LOG_COLORS = {
    'DEBUG': "\033[94m",    # Blue
    'INFO': "\033[92m",     # Green
    'WARNING': "\033[93m",  # Yellow
    'ERROR': "\033[91m",    # Red
    'CRITICAL': "\033[95m", # Magenta
    'RESET': "\033[0m"      # Reset to default
}


def _context_of(record):
    return getattr(record, "context", None) or None


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
        }
        context = _context_of(record)
        if context:
            log_record["context"] = context
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


class ColorFormatter(logging.Formatter):
    def format(self, record):
        log_color = LOG_COLORS.get(record.levelname, LOG_COLORS['RESET'])
        message = super().format(record)
        context = _context_of(record)
        if context:
            head, sep, tail = message.partition("\n")
            message = f"{head} | {json.dumps(context, default=str)}{sep}{tail}"
        return f"{log_color}{message}{LOG_COLORS['RESET']}"


class CustomLogger:
    """Colored console logger with an optional JSON-lines file sink.

    Every method takes keyword context (error codes, payloads, filters) that
    ends up next to the message on the console and under ``context`` in the
    JSON file.
    """

    def __init__(self, level=logging.DEBUG, name="gas_telemetry", log_dir=None):
        self.__logger = logging.getLogger(name)
        self.__logger.setLevel(level)
        self.__logger.propagate = False

        if not self.__logger.handlers:
            stream_handler = logging.StreamHandler()
            stream_formatter = ColorFormatter("%(asctime)s - %(levelname)s - %(message)s")
            stream_handler.setFormatter(stream_formatter)
            self.__logger.addHandler(stream_handler)

            if log_dir is not None:
                os.makedirs(log_dir, exist_ok=True)
                file_path = os.path.join(log_dir, f"{name}.json.log")
                file_handler = logging.FileHandler(file_path)
                file_handler.setFormatter(JsonFormatter())
                self.__logger.addHandler(file_handler)

    def _emit(self, level, msg, context, exc_info=False):
        extra = {"context": context} if context else None
        self.__logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg, **context):
        self._emit(logging.DEBUG, msg, context)

    def log(self, msg, **context):
        self._emit(logging.INFO, msg, context)

    def error(self, msg, **context):
        self._emit(logging.ERROR, msg, context)

    def exception(self, msg, **context):
        self._emit(logging.ERROR, msg, context, exc_info=True)

    def warning(self, msg, **context):
        self._emit(logging.WARNING, msg, context)

    def critical(self, msg, **context):
        self._emit(logging.CRITICAL, msg, context)

    def close(self):
        for handler in self.__logger.handlers[:]:
            handler.close()
            self.__logger.removeHandler(handler)
