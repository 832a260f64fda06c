import re
import sys
from typing import Any, Callable, Literal

import loguru
from loguru import logger

LogLevelType = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Shapes of credentials that show up in ARM payloads and Service Bus settings.
secret_patterns = {
    "Service Bus shared access key": r"SharedAccessKey=[^;\s]+",
    "Service Bus shared access signature": r"SharedAccessSignature\s+sr=[^\s\"']+",
    "Cosmos account key": r"AccountKey=[^;\s]+",
    "Cosmos master key in listKeys response": r"\"(?:primary|secondary)(?:Readonly)?MasterKey\":\s*\"[^\"]+\"",
    "Bearer token": r"Bearer\s+[A-Za-z0-9\-_.=]+",
    "Credentials in URL": r"[a-zA-Z][a-zA-Z0-9+.\-]*://[^/\s:@]+:[^/\s:@]+@",
}


class SensitiveLogFilter:
    compiled_patterns = [re.compile(pattern) for pattern in secret_patterns.values()]

    def hide_sensitive_strings(self, *tokens: str) -> None:
        stripped = (token.strip() for token in tokens if token)
        self.compiled_patterns.extend(re.compile(re.escape(token)) for token in stripped if token)

    def mask_string(self, string: str) -> str:
        for pattern in self.compiled_patterns:
            string = pattern.sub(lambda match: match.group()[:6] + "[REDACTED]", string)
        return string

    def create_filter(self) -> Callable[["loguru.Record"], bool]:
        def _mask_record(record: "loguru.Record") -> bool:
            record["message"] = self.mask_string(record["message"])
            return True

        return _mask_record


sensitive_log_filter = SensitiveLogFilter()


def setup_logger(level: LogLevelType = "INFO", *secrets: str) -> None:
    """Route loguru to stdout at `level`, masking credentials and the given secret values."""
    logger.remove()
    sensitive_log_filter.hide_sensitive_strings(*secrets)

    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan> | "
        "<level>{message}</level>"
    )
    if level == "DEBUG":
        logger_format += " | {extra}"

    logger.add(
        sys.stdout,
        level=level.upper(),
        format=logger_format,
        enqueue=True,
        diagnose=False,  # variable values may hold keys
        filter=sensitive_log_filter.create_filter(),
    )
    logger.configure(patcher=_plain_exception)


def _plain_exception(record: "loguru.Record") -> None:
    # enqueued records are pickled; ArmApiError needs constructor arguments to unpickle
    # https://github.com/Delgan/loguru/issues/504#issuecomment-917365972
    exception: Any = record["exception"]
    if exception is not None:
        record["exception"] = exception._replace(value=Exception(str(exception.value)))
