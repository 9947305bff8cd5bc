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

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any configure_logging() call made during a test."""
    from bigtable_instance_admin import log_wrappers

    yield
    loggers = [
        logging.getLogger(log_wrappers.PACKAGE_LOGGER_NAME),
        logging.getLogger(log_wrappers.RETRY_LOGGER_NAME),
    ]
    for logger in loggers:
        if log_wrappers._handler is not None:
            logger.removeHandler(log_wrappers._handler)
        logger.setLevel(logging.NOTSET)
    log_wrappers._handler = None
