"""
Command-line entry point: classify one complaint and print the result.

    python -m civic_triage "Huge pothole near the market" --image-url https://...
"""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

import structlog

from civic_triage.config import settings
from civic_triage.dependencies import build_engine
from civic_triage.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify a civic complaint.")
    parser.add_argument("description", nargs="?", default=None, help="Complaint description text.")
    parser.add_argument("--image-url", default=None, help="URL of the uploaded complaint photo.")
    parser.add_argument("--trace", action="store_true", help="Also print the classification trace.")
    return parser.parse_args(argv)


async def run(description: Optional[str], image_url: Optional[str], with_trace: bool = False) -> dict:
    engine = build_engine(settings)
    try:
        result, trace = await engine.classify_with_trace(description, image_url)
    finally:
        await engine.close()

    output = result.to_storage_dict()
    if with_trace:
        output["trace"] = trace.summary()
    return output


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
    logger.info("Classifying complaint from command line", environment=settings.ENVIRONMENT)

    output = asyncio.run(run(args.description, args.image_url, args.trace))
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
