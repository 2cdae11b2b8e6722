# Copyright 2026 The linguaflow Authors
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
"""linguaflow CLI."""

from __future__ import annotations

import click

from linguaflow.cli.resolve import parse_header_command, resolve_command


@click.group()
@click.version_option(package_name="linguaflow")
def cli() -> None:
    """linguaflow — request locale resolution."""


cli.add_command(resolve_command, name="resolve")
cli.add_command(parse_header_command, name="parse-header")
