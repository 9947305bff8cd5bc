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

"""Demonstrates how to connect to Cloud Bigtable and run some basic operations
on instances and clusters.

Prerequisites:

- Create a Cloud Bigtable project.
  https://cloud.google.com/bigtable/docs/
- Set your Google Application Default Credentials.
  https://developers.google.com/identity/protocols/application-default-credentials

Operations performed by :func:`run`:

- Check whether the instance exists.
- Create a PRODUCTION instance with one cluster, if it does not exist.
- List instances in the project.
- Get the instance.
- List the clusters of the instance.
- Delete the instance.
"""

import logging
import sys

# [START bigtable_hello_instance_admin_imports]
from google.cloud import bigtable
from google.cloud.bigtable import enums

# [END bigtable_hello_instance_admin_imports]

from bigtable_instance_admin.config import instance_path
from bigtable_instance_admin.exceptions import _check_call
from bigtable_instance_admin.exceptions import InstanceCreationError
from bigtable_instance_admin.log_wrappers import log_usage

_LOGGER = logging.getLogger(__name__)

SAMPLE_DISPLAY_NAME = "Sample Instance"
PRODUCTION_SERVE_NODES = 3
PRODUCTION_LABELS = {"prod-label": "prod-label"}
DEVELOPMENT_LABELS = {"dev-label": "dev-label"}


def _enum_name(value):
    return getattr(value, "name", value)


def describe_instance(instance):
    """Return a human readable, multi-line summary of ``instance``."""
    return "\n".join(
        [
            f"Name of instance: {instance.instance_id}",
            f"Resource name: {instance.name}",
            f"Display name: {instance.display_name}",
            f"Type: {_enum_name(instance.type_)}",
            f"State: {_enum_name(instance.state)}",
            f"Labels: {instance.labels}",
        ]
    )


def _report_failed_locations(failed_locations):
    if failed_locations:
        _LOGGER.warning(
            "The service tells us it has no information about these "
            "locations: %s. Continuing anyway",
            " ".join(failed_locations),
        )


def _list_instances(client):
    with _check_call():
        instances, failed_locations = client.list_instances()
    _report_failed_locations(failed_locations)
    return instances


def _wait_for_creation(operation, instance_id, timeout):
    # blocks until the resource is ready
    with _check_call(InstanceCreationError, instance_id=instance_id):
        return operation.result(timeout=timeout)


# [START bigtable_hello_instance_admin_connect]
@log_usage
def connect(project_id):
    """Create a client connected to the Cloud Bigtable admin endpoint."""
    return bigtable.Client(project=project_id, admin=True)


# [END bigtable_hello_instance_admin_connect]


# [START bigtable_hello_instance_admin_check_exists]
@log_usage
def instance_exists(client, instance_id):
    """Check whether ``instance_id`` appears in the project's instance list."""
    print("\nCheck Instance exists:")
    instance_name = instance_path(client.project, instance_id)
    exists = any(
        instance.name == instance_name for instance in _list_instances(client)
    )
    print(
        f"The instance {instance_id} {'does' if exists else 'does not'} "
        "exist already"
    )
    return exists


# [END bigtable_hello_instance_admin_check_exists]


# [START bigtable_hello_instance_admin_create_production]
@log_usage
def create_production_instance(client, instance_id, cluster_id, zone, timeout):
    """Create a PRODUCTION instance with a single 3 node HDD cluster."""
    print("\nCreating a PRODUCTION Instance:")
    instance = client.instance(
        instance_id,
        display_name=SAMPLE_DISPLAY_NAME,
        instance_type=enums.Instance.Type.PRODUCTION,
        labels=PRODUCTION_LABELS,
    )
    # production instances need at least 3 nodes
    cluster = instance.cluster(
        cluster_id,
        location_id=zone,
        serve_nodes=PRODUCTION_SERVE_NODES,
        default_storage_type=enums.StorageType.HDD,
    )
    try:
        with _check_call(InstanceCreationError, instance_id=instance_id):
            operation = instance.create(clusters=[cluster])
        _wait_for_creation(operation, instance_id, timeout)
    except InstanceCreationError:
        print(f"Could not create instance {instance_id}", file=sys.stderr)
        raise
    print(f"Successfully created instance: {instance.name}")
    print("DONE")
    return instance


# [END bigtable_hello_instance_admin_create_production]


# [START bigtable_hello_instance_admin_list_instances]
@log_usage
def list_instances(client):
    print("\nListing Instances:")
    instances = _list_instances(client)
    for instance in instances:
        print(f"  {instance.name}")
    print("DONE")
    return instances


# [END bigtable_hello_instance_admin_list_instances]


# [START bigtable_hello_instance_admin_get_instance]
@log_usage
def get_instance(client, instance_id):
    """Fetch ``instance_id`` from the service and print its details."""
    print("\nGet Instance:")
    instance = client.instance(instance_id)
    with _check_call():
        instance.reload()
    print("Instance details :")
    print(describe_instance(instance))
    return instance


# [END bigtable_hello_instance_admin_get_instance]


# [START bigtable_hello_instance_admin_list_clusters]
@log_usage
def list_clusters(client, instance_id):
    print("\nListing Clusters:")
    instance = client.instance(instance_id)
    with _check_call():
        clusters, failed_locations = instance.list_clusters()
    if failed_locations:
        print(
            "The Cloud Bigtable service reports that the following locations "
            "are temporarily unavailable and no information about clusters in "
            "these locations can be obtained:"
        )
        for failed_location in failed_locations:
            print(failed_location)
    print("Cluster Name List:")
    for cluster in clusters:
        print(f"Cluster Name: {cluster.name}")
    print("DONE")
    return clusters


# [END bigtable_hello_instance_admin_list_clusters]


# [START bigtable_hello_instance_admin_delete_instance]
@log_usage
def delete_instance(client, instance_id):
    print(f"\nDeleting instance {instance_id}")
    with _check_call():
        client.instance(instance_id).delete()
    print("DONE")


# [END bigtable_hello_instance_admin_delete_instance]


def run(config, client=None):
    """
    Walk through the instance lifecycle for ``config``.

    The instance is created only if it does not already exist; every other
    step runs regardless, ending with the instance being deleted.

    Raises:
      - ValueError: if the config has no cluster_id or zone
      - InstanceAdminError: if any admin call fails
    """
    cluster_id, zone = config.require_cluster()
    if client is None:
        client = connect(config.project_id)
    if config.emulator_host:
        _LOGGER.info("Using the Bigtable emulator at %s", config.emulator_host)

    if not instance_exists(client, config.instance_id):
        create_production_instance(
            client, config.instance_id, cluster_id, zone, config.create_timeout
        )
    list_instances(client)
    get_instance(client, config.instance_id)
    list_clusters(client, config.instance_id)
    delete_instance(client, config.instance_id)


@log_usage
def create_dev_instance(config, client=None):
    """Create a DEVELOPMENT instance with a single HDD cluster, if absent."""
    cluster_id, zone = config.require_cluster()
    if client is None:
        client = connect(config.project_id)

    print("\nCreating a DEVELOPMENT instance")
    instance = client.instance(
        config.instance_id,
        instance_type=enums.Instance.Type.DEVELOPMENT,
        labels=DEVELOPMENT_LABELS,
    )
    with _check_call():
        exists = instance.exists()
    if exists:
        print(f"Instance {config.instance_id} already exists.")
        return instance

    # development instances are not given a node count
    cluster = instance.cluster(
        cluster_id,
        location_id=zone,
        default_storage_type=enums.StorageType.HDD,
    )
    with _check_call(InstanceCreationError, instance_id=config.instance_id):
        operation = instance.create(clusters=[cluster])
    _wait_for_creation(operation, config.instance_id, config.create_timeout)
    print(f"Created development instance: {config.instance_id}")
    return instance


def _print_cluster_ids(instance):
    print("Listing clusters...")
    with _check_call():
        clusters, failed_locations = instance.list_clusters()
    _report_failed_locations(failed_locations)
    for cluster in clusters:
        print(cluster.cluster_id)
    return clusters


@log_usage
def add_cluster(config, client=None):
    """Add a 3 node SSD cluster to an existing instance."""
    cluster_id, zone = config.require_cluster()
    if client is None:
        client = connect(config.project_id)

    instance = client.instance(config.instance_id)
    print(f"\nAdding cluster to instance {config.instance_id}")
    with _check_call():
        exists = instance.exists()
    if not exists:
        print(f"Instance {config.instance_id} does not exist.")
        return None

    _print_cluster_ids(instance)
    cluster = instance.cluster(
        cluster_id,
        location_id=zone,
        serve_nodes=PRODUCTION_SERVE_NODES,
        default_storage_type=enums.StorageType.SSD,
    )
    with _check_call():
        exists = cluster.exists()
    if exists:
        print(f"Cluster not created, as {cluster_id} already exists.")
        return cluster

    with _check_call():
        operation = cluster.create()
        operation.result(timeout=config.create_timeout)
    print(f"Cluster created: {cluster_id}")
    return cluster


@log_usage
def delete_cluster(config, client=None):
    """Delete a cluster from an instance, if the cluster exists."""
    if config.cluster_id is None:
        raise ValueError("this command needs a cluster_id")
    if client is None:
        client = connect(config.project_id)

    instance = client.instance(config.instance_id)
    cluster = instance.cluster(config.cluster_id)
    print("\nDeleting cluster")
    with _check_call():
        if not cluster.exists():
            print(f"Cluster {config.cluster_id} does not exist.")
            return False
        cluster.delete()
    print(f"Cluster deleted: {config.cluster_id}")
    return True


@log_usage
def delete_instance_if_present(config, client=None):
    """Delete the instance, reporting rather than failing when it is absent."""
    if client is None:
        client = connect(config.project_id)

    instance = client.instance(config.instance_id)
    print("\nDeleting instance")
    with _check_call():
        if not instance.exists():
            print(f"Instance {config.instance_id} does not exist.")
            return False
        instance.delete()
    print(f"Deleted instance: {config.instance_id}")
    return True
