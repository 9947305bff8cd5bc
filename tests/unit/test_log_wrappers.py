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

import io
import logging

import pytest

from bigtable_instance_admin import log_wrappers


class TestLogUsage:
    @pytest.fixture(autouse=True)
    def debug_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger=log_wrappers.__name__)

    def test_success(self, caplog):
        def add(a, b):
            return a + b

        wrapped = log_wrappers.log_usage(add)
        assert wrapped(1, b=2) == 3
        assert wrapped.__name__ == "add"
        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 2
        assert messages[0].startswith("Entering")
        assert "add" in messages[0]
        assert "kwargs={'b': 2}" in messages[0]
        assert "with success" in messages[1]

    def test_exception_reraised(self, caplog):
        def fail():
            raise RuntimeError("boom")

        wrapped = log_wrappers.log_usage(fail, name="custom_name")
        with pytest.raises(RuntimeError):
            wrapped()
        messages = [r.getMessage() for r in caplog.records]
        assert "Entering custom_name" in messages[0]
        assert "Exiting custom_name with exception=RuntimeError('boom')" in messages[1]

    def test_call_ids_match(self, caplog):
        wrapped = log_wrappers.log_usage(lambda: None)
        wrapped()
        entering, exiting = [r.getMessage() for r in caplog.records]
        call_id = entering.split("call_id=")[1].rstrip(")")
        assert f"call_id={call_id}" in exiting


class TestConfigureLogging:
    def test_default_level(self):
        stream = io.StringIO()
        handler = log_wrappers.configure_logging(stream=stream)
        package_logger = logging.getLogger(log_wrappers.PACKAGE_LOGGER_NAME)
        assert handler in package_logger.handlers
        assert handler.level == logging.INFO
        assert package_logger.level == logging.INFO
        retry_logger = logging.getLogger(log_wrappers.RETRY_LOGGER_NAME)
        assert handler not in retry_logger.handlers

        logging.getLogger("bigtable_instance_admin.instanceadmin").warning("careful")
        logging.getLogger("bigtable_instance_admin.instanceadmin").debug("hidden")
        assert stream.getvalue() == "careful\n"

    def test_verbose(self):
        stream = io.StringIO()
        handler = log_wrappers.configure_logging(verbose=True, stream=stream)
        assert handler.level == logging.DEBUG
        retry_logger = logging.getLogger(log_wrappers.RETRY_LOGGER_NAME)
        assert handler in retry_logger.handlers

        retry_logger.debug("retrying")
        assert "retrying" in stream.getvalue()

    def test_reconfigure_replaces_handler(self):
        first = log_wrappers.configure_logging(verbose=True, stream=io.StringIO())
        second = log_wrappers.configure_logging(stream=io.StringIO())
        package_logger = logging.getLogger(log_wrappers.PACKAGE_LOGGER_NAME)
        retry_logger = logging.getLogger(log_wrappers.RETRY_LOGGER_NAME)
        assert first not in package_logger.handlers
        assert first not in retry_logger.handlers
        assert second in package_logger.handlers
