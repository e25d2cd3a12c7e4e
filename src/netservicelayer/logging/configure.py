#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import logging
import sys

from pythonjsonlogger import jsonlogger
import structlog
from structlog.contextvars import merge_contextvars

from netservicelayer.utils.date import utcnow


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record: logging.LogRecord, message_dict):
        super(CustomJsonFormatter, self).add_fields(
            log_record, record, message_dict
        )

        log_record["logger"] = f"{record.name}:{record.lineno}"
        log_record["level"] = record.levelname
        if not log_record.get("timestamp"):
            # this doesn't use record.created, so it is slightly off
            log_record["timestamp"] = utcnow().strftime(
                "%Y-%m-%dT%H:%M:%S.%fZ"
            )


def configure_logging(level=logging.INFO, http_client_level=logging.WARNING):
    """
    structlog renders into the standard library so that third party loggers
    (uvicorn, aiohttp) share the same JSON output. See
    https://www.structlog.org/en/stable/standard-library.html#rendering-using-logging-based-formatters.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            # "event" becomes "msg" and the rest goes into "extra", which
            # the JSON formatter renders.
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(CustomJsonFormatter())
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("aiohttp.client").setLevel(http_client_level)
    logging.getLogger("aiohttp.internal").setLevel(http_client_level)
