"""
Shared plumbing for the example programs.

Each example builds a VmwareService from settings (.env or environment
variables such as IAM_APIKEY and SERVICE_URL), runs one operation and prints
the decoded model as indented JSON followed by the HTTP status.
"""

import argparse
import asyncio
import json
import sys
from collections.abc import Awaitable, Callable

from vmware_client.config import get_settings
from vmware_client.core.logging import setup_logging
from vmware_client.services.vmware_service import OperationResult, VmwareService

Operation = Callable[[VmwareService, argparse.Namespace], Awaitable[OperationResult]]


def print_result(outcome: OperationResult) -> None:
    result, response, err = outcome
    if err is not None:
        print(json.dumps(err.to_dict(), indent=2))
        sys.exit(1)
    if result is not None:
        print(json.dumps(result.to_dict(), indent=2))
    print(f"HTTP {response.status_code}")


def run(parser: argparse.ArgumentParser, operations: dict[str, Operation]) -> None:
    """Parse the command line, run the chosen operation and print its outcome."""
    parser.add_argument("operation", choices=sorted(operations))
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    async def _main() -> OperationResult:
        async with VmwareService.from_settings(settings) as service:
            return await operations[args.operation](service, args)

    print_result(asyncio.run(_main()))
