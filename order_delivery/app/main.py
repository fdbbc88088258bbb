"""
Console Entry Point.

This is the driver for the Order Delivery tracker: it walks the sample
journeys and prints one status line per delivery state.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from order_delivery.app.core.config import settings
from order_delivery.app.core.exceptions import AppException, error_payload
from order_delivery.app.core.observability import configure_logging, logger, new_correlation_id
from order_delivery.app.domain.delivery.journey import SAMPLE_JOURNEYS, filter_by_stage
from order_delivery.app.models.delivery_enums import DeliveryStage
from order_delivery.app.services.status_renderer import print_journey


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="order-delivery",
        description="Print the delivery status of the sample orders.",
    )
    parser.add_argument(
        "--stage",
        help="Only print states of this stage (e.g. Dispatched or DISPATCHED)",
    )
    return parser


def run(argv: Optional[List[str]] = None, stream: TextIO = None) -> int:
    """
    Print every sample journey.

    An unknown ``--stage`` name is logged and re-raised; nothing is printed
    in that case.

    Returns:
        int: Process exit code
    """
    configure_logging(settings)
    args = build_parser().parse_args(argv)
    correlation_id = new_correlation_id()
    logger.info("Run Started", extra={"correlation_id": correlation_id, "app_name": settings.app_name})

    try:
        stage = DeliveryStage.from_name(args.stage) if args.stage is not None else None
    except AppException as exc:
        logger.error("Run Failed", extra={"correlation_id": correlation_id, "error": error_payload(exc)})
        raise

    for journey in SAMPLE_JOURNEYS:
        steps = list(journey) if stage is None else filter_by_stage(list(journey), stage)
        print_journey(steps, stream=stream)

    logger.info("Run Completed", extra={"correlation_id": correlation_id, "journeys": len(SAMPLE_JOURNEYS)})
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
