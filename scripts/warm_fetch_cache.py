#!/usr/bin/env python3
"""
Warm a fetch cache for a list of resources.

Loads every resource through a freshly built HTTP cache with bounded
concurrency and prints a JSON summary. Useful for checking that a set of
endpoints resolves and decodes before pointing clients at them.
"""

import argparse
import asyncio
import json
from pathlib import Path
from typing import List, Optional
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from fetch_cache.app.caching.warmer import CacheWarmer  # noqa: E402
from fetch_cache.app.factory import create_cached_fetch  # noqa: E402
from shared.config import get_config  # noqa: E402
from shared.logging import configure_logging, set_request_id  # noqa: E402


def load_resources(resources: List[str], resources_file: Optional[Path]) -> List[str]:
    """Combine positional resources with one-per-line entries from a file."""
    combined = list(resources)
    if resources_file:
        for line in resources_file.read_text().splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                combined.append(line)
    return combined


async def warm(
    *,
    resources: List[str],
    base_url: Optional[str],
    timeout: Optional[float],
    concurrency: Optional[int],
) -> dict:
    """Execute cache warming and return the summary."""
    overrides = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["request_timeout"] = timeout
    if concurrency is not None:
        overrides["warm_concurrency"] = concurrency
    config = get_config(**overrides)

    cache = create_cached_fetch(config, name="warm")
    warmer = CacheWarmer(cache, concurrency=config.warm_concurrency)
    return await warmer.warm(resources)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Warm a fetch cache for a list of resources.")
    parser.add_argument("resources", nargs="*", help="Resource URLs or paths relative to --base-url")
    parser.add_argument("--file", type=Path, default=None, help="File with one resource per line")
    parser.add_argument("--base-url", default=None, help="Base URL for relative resources (FETCH_CACHE_BASE_URL)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--concurrency", type=int, default=None, help="Concurrent warm operations")
    parser.add_argument("--log-level", default=None, help="Log level (FETCH_CACHE_LOG_LEVEL)")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write JSON summary")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging("cache-warm", args.log_level or get_config().log_level)
    set_request_id()

    resources = load_resources(args.resources, args.file)
    if not resources:
        print("[cache-warm] no resources given", file=sys.stderr)
        return 2

    try:
        summary = asyncio.run(
            warm(
                resources=resources,
                base_url=args.base_url,
                timeout=args.timeout,
                concurrency=args.concurrency,
            )
        )
    except KeyboardInterrupt:
        return 130
    except Exception as exc:  # pragma: no cover - CLI surface
        print(f"[cache-warm] failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(summary, indent=2))

    if args.output:
        args.output.write_text(json.dumps(summary, indent=2))

    return 1 if summary["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
