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

import os

import nox

DEFAULT_PYTHON_VERSION = "3.11"
BLACK_VERSION = "black==22.3.0"
LINT_PATHS = ["bigtable_instance_admin", "tests", "noxfile.py"]


@nox.session(python=DEFAULT_PYTHON_VERSION)
def unit(session: nox.sessions.Session) -> None:
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "--quiet",
        "--cov=bigtable_instance_admin",
        "--cov-report=term-missing",
        os.path.join("tests", "unit"),
        *session.posargs,
    )


@nox.session(python=DEFAULT_PYTHON_VERSION)
def system(session: nox.sessions.Session) -> None:
    if not os.environ.get("GOOGLE_CLOUD_PROJECT"):
        session.skip("GOOGLE_CLOUD_PROJECT must be set for system tests")
    session.install("-e", ".[test]")
    session.run("pytest", "-s", os.path.join("tests", "system"), *session.posargs)


@nox.session(python=DEFAULT_PYTHON_VERSION)
def blacken(session: nox.sessions.Session) -> None:
    """Run black. Format code to uniform standard."""
    session.install(BLACK_VERSION)
    session.run(
        "black",
        *LINT_PATHS,
    )


# Linting with flake8.
#
# We ignore the following rules:
#   E203: whitespace before ‘:’
#   E266: too many leading ‘#’ for block comment
#   E501: line too long
#   I202: Additional newline in a section of imports
FLAKE8_COMMON_ARGS = [
    "--show-source",
    "--builtin=gettext",
    "--max-complexity=20",
    "--exclude=.nox,.cache,env,lib",
    "--ignore=E121,E123,E126,E203,E226,E24,E266,E501,E704,W503,W504,I202",
    "--max-line-length=88",
]


@nox.session(python=DEFAULT_PYTHON_VERSION)
def lint(session: nox.sessions.Session) -> None:
    session.install("flake8")
    session.run("flake8", *FLAKE8_COMMON_ARGS, *LINT_PATHS)
