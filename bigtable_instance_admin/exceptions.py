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
#
from __future__ import annotations

import concurrent.futures
import contextlib

from typing import Any, Iterator

from google.api_core import exceptions as core_exceptions


class InstanceAdminError(Exception):
    """
    Raised when a call to the Bigtable instance admin API fails.

    The originating ``google.api_core`` exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self):
        if self.code:
            return f"{self.code}: {self.message}"
        return self.message


class InstanceCreationError(InstanceAdminError):
    """Raised when an instance could not be created, or creation timed out."""

    def __init__(self, message: str, instance_id: str, code: str | None = None):
        super().__init__(message, code=code)
        self.instance_id = instance_id


def _status_code_name(exc: core_exceptions.GoogleAPICallError) -> str | None:
    status_code = exc.grpc_status_code
    if status_code is None:
        return None
    return status_code.name


@contextlib.contextmanager
def _check_call(
    error_cls: type[InstanceAdminError] = InstanceAdminError, **kwargs: Any
) -> Iterator[None]:
    """
    Convert admin API failures raised inside the block into ``error_cls``.

    Args:
      - error_cls: the InstanceAdminError subclass to raise
      - kwargs: extra keyword arguments passed to ``error_cls``
    Raises:
      - error_cls: if the block raised a GoogleAPICallError, ran out of
          retries, or timed out waiting on a long-running operation
    """
    try:
        yield
    except core_exceptions.GoogleAPICallError as exc:
        raise error_cls(
            exc.message, code=_status_code_name(exc), **kwargs
        ) from exc
    except core_exceptions.RetryError as exc:
        raise error_cls(str(exc), code="DEADLINE_EXCEEDED", **kwargs) from exc
    except concurrent.futures.TimeoutError as exc:
        raise error_cls(
            "Timed out waiting for the operation to complete",
            code="DEADLINE_EXCEEDED",
            **kwargs,
        ) from exc
