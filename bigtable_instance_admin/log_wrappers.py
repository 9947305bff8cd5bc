# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import functools
import logging
import time
import uuid

PACKAGE_LOGGER_NAME = "bigtable_instance_admin"
RETRY_LOGGER_NAME = "google.api_core.retry"

_LOG_FORMAT = "%(message)s"
_VERBOSE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOGGER = logging.getLogger(__name__)

# handler installed by the last configure_logging() call
_handler = None


def log_usage(func, name=None):
    """Log entry, exit and elapsed time of ``func`` at DEBUG level."""
    fn_name = name or func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        call_id = uuid.uuid4()
        start_time = time.monotonic()
        _LOGGER.debug(
            "Entering %s(args=%s, kwargs=%s). (call_id=%s)",
            fn_name,
            args,
            kwargs,
            call_id,
        )
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _LOGGER.debug(
                "Exiting %s with exception=%r (call_id=%s, elapsed_time=%.3f)",
                fn_name,
                e,
                call_id,
                time.monotonic() - start_time,
            )
            raise
        _LOGGER.debug(
            "Exiting %s with success (call_id=%s, elapsed_time=%.3f)",
            fn_name,
            call_id,
            time.monotonic() - start_time,
        )
        return result

    return wrapper


def configure_logging(verbose=False, stream=None):
    """
    Send package log records to ``stream`` (stderr by default).

    With ``verbose`` set, DEBUG records are emitted, and retry attempts made
    by ``google.api_core`` are logged through the same handler.
    Calling this again replaces the handler installed by the previous call.
    """
    global _handler

    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(_VERBOSE_LOG_FORMAT if verbose else _LOG_FORMAT)
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    retry_logger = logging.getLogger(RETRY_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        retry_logger.removeHandler(_handler)

    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    if verbose:
        retry_logger.setLevel(logging.DEBUG)
        retry_logger.addHandler(handler)

    _handler = handler
    return handler
