# File: src/storeypark/main.py
"""
Main application entry point for the Storey Parking System
Sets up logging, builds the service from configuration and runs a demo
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import StoreyConfig
from .application.parking_service import StoreyService

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(config: StoreyConfig) -> logging.Logger:
    """Setup application logging configuration"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=config.numeric_log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def create_service(config: Optional[StoreyConfig] = None) -> StoreyService:
    """Build the storey service from configuration"""
    return StoreyService(config=config or StoreyConfig.from_env())


def run_demo(service: StoreyService) -> List[str]:
    """Run a short scripted session and return the rendered responses"""
    capacity = service.level.capacity
    responses = [service.create_parking_lot(capacity)]

    for plate, color in [
        ("KA-01-HH-1234", "White"),
        ("KA-01-HH-9999", "White"),
        ("KA-01-BB-0001", "Black"),
    ]:
        responses.append(service.park(plate, color))

    responses.append(service.leave_by_position(2))
    responses.append(service.park("KA-01-HH-7777", "Red"))
    responses.append(service.status())
    responses.append(service.plates_for_color("White"))
    responses.append(service.slot_numbers_for_color("White"))
    responses.append(service.slot_number_for_plate("KA-01-HH-7777"))
    responses.append(service.slot_number_for_plate("MH-04-AY-1111"))

    return [response.render() for response in responses]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Storey parking demo")
    parser.add_argument("--capacity", type=int, help="Number of slots on the level")
    parser.add_argument("--strategy", help="Position strategy: gap_scan or free_heap")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = vars(StoreyConfig.from_env()).copy()
        overrides = {
            "capacity": args.capacity,
            "strategy": args.strategy,
            "log_level": args.log_level,
        }
        settings.update({k: v for k, v in overrides.items() if v is not None})
        config = StoreyConfig(**settings)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logger = setup_logging(config)
    logger.info("Starting storey parking demo...")

    service = create_service(config)
    for line in run_demo(service):
        if line:
            print(line)

    logger.info("Demo finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
