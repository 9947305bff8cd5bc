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

import argparse
import logging
import sys

from bigtable_instance_admin import instanceadmin
from bigtable_instance_admin.config import DEFAULT_CREATE_TIMEOUT
from bigtable_instance_admin.config import InstanceAdminConfig
from bigtable_instance_admin.log_wrappers import configure_logging

_LOGGER = logging.getLogger(__name__)

PROG = "bigtable-hello-instance-admin"
EXAMPLE = f"Example: {PROG} my-project my-instance my-instance-c1 us-central1-f"

DEFAULT_COMMAND = "run"

# command name -> (operation, takes a cluster id, takes a zone)
COMMANDS = {
    "run": (instanceadmin.run, True, True),
    "dev-instance": (instanceadmin.create_dev_instance, True, True),
    "add-cluster": (instanceadmin.add_cluster, True, True),
    "del-cluster": (instanceadmin.delete_cluster, True, False),
    "del-instance": (instanceadmin.delete_instance_if_present, False, False),
}

_COMMAND_HELP = {
    "run": "Create an instance if needed, inspect it, then delete it.",
    "dev-instance": "Create a DEVELOPMENT instance.",
    "add-cluster": "Add a cluster to an existing instance.",
    "del-cluster": "Delete a cluster from an instance.",
    "del-instance": "Delete an instance, if it exists.",
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CREATE_TIMEOUT,
        help="Seconds to wait for instance or cluster creation.",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Log every admin call."
    )

    parser = _ArgumentParser(
        prog=PROG,
        description=instanceadmin.__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLE,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True
    for name, (_, takes_cluster, takes_zone) in COMMANDS.items():
        subparser = subparsers.add_parser(
            name, parents=[common], help=_COMMAND_HELP[name]
        )
        subparser.add_argument("project_id", help="Your Cloud Platform project ID.")
        subparser.add_argument(
            "instance_id", help="ID of the Cloud Bigtable instance to connect to."
        )
        if takes_cluster:
            subparser.add_argument(
                "cluster_id", help="ID of the Cloud Bigtable cluster to use."
            )
        if takes_zone:
            subparser.add_argument(
                "zone", help="Zone to place the cluster in, e.g. us-central1-f."
            )
    return parser


def _with_default_command(argv):
    # "<project-id> <instance-id> <cluster-id> <zone>" runs the walkthrough
    if argv and argv[0] not in COMMANDS and argv[0] not in ("-h", "--help"):
        return [DEFAULT_COMMAND] + list(argv)
    return list(argv)


def main(argv=None):
    """Run one sample command and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(_with_default_command(argv))
    configure_logging(args.verbose)

    operation = COMMANDS[args.command][0]
    try:
        config = InstanceAdminConfig.from_env(
            args.instance_id,
            project_id=args.project_id,
            cluster_id=getattr(args, "cluster_id", None),
            zone=getattr(args, "zone", None),
            create_timeout=args.timeout,
        )
        operation(config)
    except Exception as ex:
        _LOGGER.debug("%s failed", args.command, exc_info=True)
        print(f"Exception raised: {ex}", file=sys.stderr)
        return 1
    return 0
