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
"""Settings shared by the instance admin sample commands."""
from __future__ import annotations

import os
import re

from dataclasses import dataclass

from google.cloud.environment_vars import BIGTABLE_EMULATOR

PROJECT_ENV_VAR = "GOOGLE_CLOUD_PROJECT"

# production instances must finish provisioning all of their nodes
DEFAULT_CREATE_TIMEOUT = 480.0

_RESOURCE_ID_RE = re.compile(r"^[a-z][-a-z0-9]*$")


@dataclass(frozen=True)
class InstanceAdminConfig:
    """
    Identifies the project, instance and cluster the sample operates on.

    Args:
      - project_id: the Google Cloud project that owns the instance
      - instance_id: the Bigtable instance id
      - cluster_id: the cluster id. Only needed by commands that create
          or delete a cluster
      - zone: the zone new clusters are placed in, e.g. ``us-central1-f``
      - create_timeout: seconds to wait for instance or cluster creation
    Raises:
      - ValueError: if any field is missing or malformed
    """

    project_id: str
    instance_id: str
    cluster_id: str | None = None
    zone: str | None = None
    create_timeout: float = DEFAULT_CREATE_TIMEOUT

    def __post_init__(self):
        if not self.project_id:
            raise ValueError(
                f"project_id is required (or set {PROJECT_ENV_VAR})"
            )
        _validate_resource_id("instance_id", self.instance_id)
        if self.cluster_id is not None:
            _validate_resource_id("cluster_id", self.cluster_id)
        if self.zone is not None and not self.zone:
            raise ValueError("zone must not be empty")
        if self.create_timeout <= 0:
            raise ValueError("create_timeout must be positive")

    @classmethod
    def from_env(
        cls,
        instance_id: str,
        cluster_id: str | None = None,
        zone: str | None = None,
        project_id: str | None = None,
        create_timeout: float = DEFAULT_CREATE_TIMEOUT,
    ) -> "InstanceAdminConfig":
        """Build a config, reading the project from the environment if needed."""
        return cls(
            project_id=project_id or os.environ.get(PROJECT_ENV_VAR, ""),
            instance_id=instance_id,
            cluster_id=cluster_id,
            zone=zone,
            create_timeout=create_timeout,
        )

    @property
    def instance_name(self) -> str:
        return instance_path(self.project_id, self.instance_id)

    @property
    def emulator_host(self) -> str | None:
        return os.environ.get(BIGTABLE_EMULATOR)

    def require_cluster(self) -> tuple[str, str]:
        """Return ``(cluster_id, zone)``, raising ValueError if either is unset."""
        if self.cluster_id is None or self.zone is None:
            raise ValueError("this command needs both a cluster_id and a zone")
        return self.cluster_id, self.zone


def instance_path(project_id: str, instance_id: str) -> str:
    """Return the fully-qualified name ``projects/<p>/instances/<i>``."""
    return f"projects/{project_id}/instances/{instance_id}"


def _validate_resource_id(field: str, value: str | None):
    if not value:
        raise ValueError(f"{field} is required")
    if _RESOURCE_ID_RE.match(value) is None:
        raise ValueError(
            f"{field} {value!r} must start with a lowercase letter and contain "
            "only lowercase letters, digits and hyphens"
        )
