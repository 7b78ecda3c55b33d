#!/usr/bin/env python3
"""
CLI entry point for domain-manager-testkit.

Provides command-line access to the integration test helpers so test stacks
can be deployed, inspected and cleaned up by hand.
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, NoReturn

from domain_manager_testkit.infrastructure.config import TestkitConfig
from domain_manager_testkit.infrastructure.logger import log_operation, setup_logger
from domain_manager_testkit.utilities import TestkitServices, build_services

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "cli",
        "description": "Command-line interface for domain-manager-testkit",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="domain-manager-testkit",
        description="Deploy and inspect serverless-domain-manager integration test stacks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--profile",
        help="AWS credentials profile (default: $AWS_PROFILE)",
    )

    parser.add_argument(
        "--region",
        help="AWS region (default: $INTEGRATION_TEST_REGION or us-west-2)",
    )

    parser.add_argument(
        "--tests-dir",
        help="Directory holding test stack folders (default: test/integration-tests)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # link command
    subparsers.add_parser(
        "link",
        help="npm link the plugin package into the current project",
    )

    # deploy command
    deploy_parser = subparsers.add_parser(
        "deploy",
        help="Create the domain and deploy the stack in a test folder",
    )
    deploy_parser.add_argument("--folder", required=True, help="Test stack folder name")
    deploy_parser.add_argument(
        "--random-string",
        required=True,
        help="Suffix used to namespace this run's resources",
    )

    # remove command
    remove_parser = subparsers.add_parser(
        "remove",
        help="Delete the domain and remove the stack in a test folder",
    )
    remove_parser.add_argument("--folder", required=True, help="Test stack folder name")

    # create command
    create_parser_ = subparsers.add_parser(
        "create",
        help="Deploy a test stack and wait for its domain to resolve",
    )
    create_parser_.add_argument("--folder", required=True, help="Test stack folder name")
    create_parser_.add_argument("--domain", required=True, help="Custom domain of the stack")
    create_parser_.add_argument(
        "--random-string",
        required=True,
        help="Suffix used to namespace this run's resources",
    )
    create_parser_.add_argument(
        "--skip-dns",
        action="store_true",
        help="Do not wait for DNS propagation",
    )

    # destroy command
    destroy_parser = subparsers.add_parser(
        "destroy",
        help="Remove a test stack and its domain",
    )
    destroy_parser.add_argument("--folder", required=True, help="Test stack folder name")
    destroy_parser.add_argument("--domain", required=True, help="Custom domain of the stack")

    # lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Show endpoint type, stage and base path of a custom domain",
    )
    lookup_parser.add_argument("--domain", required=True, help="Custom domain")

    # dns command
    dns_parser = subparsers.add_parser(
        "dns",
        help="Check whether a domain resolves",
    )
    dns_parser.add_argument("--domain", required=True, help="Domain to resolve")
    dns_parser.add_argument(
        "--wait",
        action="store_true",
        help="Poll until the domain resolves or retries run out",
    )

    # curl command
    curl_parser = subparsers.add_parser(
        "curl",
        help="GET a URL and print the status code",
    )
    curl_parser.add_argument("--url", required=True, help="URL to request")

    return parser


def load_config(args: argparse.Namespace) -> TestkitConfig:
    """Build configuration from the environment and command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        TestkitConfig instance
    """
    config = TestkitConfig.from_env()
    overrides: dict[str, Any] = {}
    if args.profile:
        overrides["aws_profile"] = args.profile
    if args.region:
        overrides["region"] = args.region
    if args.tests_dir:
        overrides["tests_dir"] = Path(args.tests_dir)
    return replace(config, **overrides) if overrides else config


def _report(args: argparse.Namespace, result: dict[str, Any]) -> None:
    """Print a command result in the requested format."""
    if args.output == "json":
        print(json.dumps(result, indent=2))
    else:
        for key, value in result.items():
            print(f"{key}: {value}")


def _exit_code(ok: bool) -> int:
    return 0 if ok else 1


async def cmd_link(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute link command."""
    linked = await services.deployment.link_packages()
    _report(args, {"linked": linked})
    return _exit_code(linked)


async def cmd_deploy(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute deploy command."""
    deployed = await services.deployment.deploy_lambdas(args.folder, args.random_string)
    _report(args, {"folder": args.folder, "deployed": deployed})
    return _exit_code(deployed)


async def cmd_remove(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute remove command."""
    removed = await services.deployment.remove_lambdas(args.folder)
    _report(args, {"folder": args.folder, "removed": removed})
    return _exit_code(removed)


async def cmd_create(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute create command."""
    created = await services.resources.create_resources(
        args.folder, args.domain, args.random_string, not args.skip_dns
    )
    _report(args, {"folder": args.folder, "domain": args.domain, "created": created})
    return _exit_code(created)


async def cmd_destroy(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute destroy command."""
    destroyed = await services.resources.destroy_resources(args.folder, args.domain)
    _report(args, {"folder": args.folder, "domain": args.domain, "destroyed": destroyed})
    return _exit_code(destroyed)


async def cmd_lookup(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute lookup command.

    Reports a failure exit code when the domain itself cannot be read; a
    domain with no base path mappings is still a successful lookup.
    """
    endpoint_type, stage, base_path = await asyncio.gather(
        services.lookup.get_endpoint_type(args.domain),
        services.lookup.get_stage(args.domain),
        services.lookup.get_base_path(args.domain),
    )
    _report(
        args,
        {
            "domain": args.domain,
            "endpoint_type": endpoint_type,
            "stage": stage,
            "base_path": base_path,
        },
    )
    return _exit_code(endpoint_type is not None)


async def cmd_dns(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute dns command."""
    if args.wait:
        resolved = await services.dns.verify_dns_propagation(args.domain, True)
    else:
        resolved = await services.dns.dns_lookup(args.domain)
    _report(args, {"domain": args.domain, "resolved": resolved})
    return _exit_code(resolved)


async def cmd_curl(args: argparse.Namespace, services: TestkitServices) -> int:
    """Execute curl command."""
    status = await services.http.get_status(args.url)
    _report(args, {"url": args.url, "status": status})
    return _exit_code(status is not None)


COMMANDS = {
    "link": cmd_link,
    "deploy": cmd_deploy,
    "remove": cmd_remove,
    "create": cmd_create,
    "destroy": cmd_destroy,
    "lookup": cmd_lookup,
    "dns": cmd_dns,
    "curl": cmd_curl,
}


def run(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected command.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = setup_logger(verbose=args.verbose)

    try:
        config = load_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    log_operation(
        logger,
        f"Running {args.command}",
        {"profile": config.aws_profile or "default", "region": config.region},
        level=logging.DEBUG,
    )
    services = build_services(config)
    return asyncio.run(COMMANDS[args.command](args, services))


def main() -> NoReturn:
    """Main entry point for the CLI.

    Parses arguments and dispatches to appropriate command handler.
    """
    sys.exit(run())


if __name__ == "__main__":
    main()
