"""CLI entry point for the smoke test suite."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence

from site_smoke.config import SuiteConfig
from site_smoke.runner import run_suite


def build_config(
    config_json: str,
    api_base_url: str | None = None,
    website_url: str | None = None,
) -> SuiteConfig:
    """Build the suite configuration from JSON and command line overrides."""
    config_dict = json.loads(config_json)
    if api_base_url is not None:
        config_dict["api_base_url"] = api_base_url
    if website_url is not None:
        config_dict["website_url"] = website_url
    return SuiteConfig(**config_dict)


async def run(config: SuiteConfig) -> int:
    """Run the suite, print the JSON report and return exit code."""
    log = logging.getLogger("site_smoke")
    log.info(
        "Testing api_base_url=%s, website_url=%s",
        config.api_base_url,
        config.website_url,
    )

    summary = await run_suite(config)
    print(json.dumps(summary.to_dict(), indent=2, default=str))

    return 1 if summary.failed else 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run smoke tests against a website and its REST API"
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the suite",
    )
    parser.add_argument(
        "--api-base-url",
        help="Base URL of the API (overrides the configuration)",
    )
    parser.add_argument(
        "--website-url",
        help="URL of the website (overrides the configuration)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = build_config(args.config, args.api_base_url, args.website_url)
    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
