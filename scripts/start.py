#!/usr/bin/env python
"""Start the PageGate API.

Loads the site configuration once so a broken file fails the deploy instead
of the first request, then replaces this process with uvicorn.

Environment:
    SITE_CONFIG_PATH  Business configuration to serve
    API_HOST/API_PORT Bind address
    API_WORKERS       uvicorn worker processes (default 1)
"""

import os
import signal
import sys

# Add project root to path
sys.path.insert(0, ".")

from api.config import Settings, get_settings  # noqa: E402
from pagegate.site import SiteConfigError, load_site_config  # noqa: E402


def check_site_config() -> bool:
    """Return False when the configured site cannot be loaded."""
    settings = get_settings()
    print(f"Checking site configuration {settings.site_config_path}...")
    try:
        site = load_site_config(settings.site_config_path, base_url=settings.site_url)
    except SiteConfigError as e:
        print(f"Site configuration invalid: {e}", file=sys.stderr)
        return False
    print(
        f"Loaded {site.profile.business.name}: "
        f"{len(site.services)} services, {len(site.service_areas)} service areas."
    )
    return True


def uvicorn_args(settings: Settings, workers: str) -> list[str]:
    return [
        "uvicorn",
        "api.main:app",
        "--host",
        settings.api_host,
        "--port",
        str(settings.api_port),
        "--workers",
        workers,
        "--proxy-headers",
        "--forwarded-allow-ips",
        "*",
    ]


def start_api() -> None:
    settings = get_settings()
    workers = os.getenv("API_WORKERS", "1")
    print(f"Serving on {settings.api_host}:{settings.api_port} with {workers} worker(s)...")
    os.execvp("uvicorn", uvicorn_args(settings, workers))


def signal_handler(signum: int, _frame: object) -> None:
    print(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    if not check_site_config():
        sys.exit(1)

    start_api()


if __name__ == "__main__":
    main()
