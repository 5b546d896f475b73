"""Demonstration entry point for Smart House."""

import logging

from smart_house.builder import sample_house

logger = logging.getLogger(__name__)

REPORT_DIVIDER = "==========================="


def run() -> None:
    """Print the sample house report twice.

    Both reports are expected to be identical. Any failure propagates and
    aborts the process.
    """
    house = sample_house()
    logger.info(f"Reporting on sample house: {house.name}")

    print(f"Report #1: {house.create_report()}")
    print(REPORT_DIVIDER)
    print(f"Report #2: {house.create_report()}")


if __name__ == "__main__":
    run()
