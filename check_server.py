#!/usr/bin/env python3
import aiohttp
import argparse
import asyncio
import logging

from app.api.root import GREETING


DEFAULT_BASE_URL = "http://localhost:8123"

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

async def check_greeting(session: aiohttp.ClientSession, base_url: str) -> bool:
    """Check the root route returns the plain-text greeting."""
    logger.info("Checking root endpoint")
    async with session.get(f"{base_url}/") as response:
        text = await response.text()
        if response.status == 200 and text == GREETING:
            logger.info(f"Greeting check passed: {text!r}")
            return True
        logger.error(f"Greeting check failed: {response.status} - {text!r}")
        return False

async def check_health(session: aiohttp.ClientSession, base_url: str) -> bool:
    logger.info("Checking health endpoint")
    async with session.get(f"{base_url}/api/v1/health") as response:
        if response.status == 200:
            data = await response.json()
            logger.info(f"Health check passed: {data}")
            return True
        logger.error(f"Health check failed: {response.status}")
        return False

async def run_checks(base_url: str) -> bool:
    """Run all live checks and return success status."""
    logger.info(f"Starting backend checks against {base_url}")

    async with aiohttp.ClientSession() as session:
        if not await check_health(session, base_url):
            logger.error("Server health check failed")
            return False

        # The greeting is stateless, so repeated calls must agree
        for _ in range(2):
            if not await check_greeting(session, base_url):
                return False

    logger.info("All checks completed successfully")
    return True

def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke check a running backend")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL,
                        help="Base URL of the running server")
    args = parser.parse_args()

    try:
        success = asyncio.run(run_checks(args.base_url.rstrip("/")))
        exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.warning("Checks interrupted by user")
        exit(130)
    except aiohttp.ClientError as e:
        logger.error(f"Could not reach server: {e}")
        exit(1)

if __name__ == "__main__":
    main()
