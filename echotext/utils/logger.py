# echotext/utils/logger.py

import logging
import traceback

access_logger = logging.getLogger("access")
error_logger = logging.getLogger("error")


def log_info(message):
    access_logger.info(message)


def log_exception(e: Exception, context: str = ""):
    error_logger.error(f"Exception in {context}: {type(e).__name__}: {e}\n{traceback.format_exc()}")
