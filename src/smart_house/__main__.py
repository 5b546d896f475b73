"""Allow running the demonstration with ``python -m smart_house``."""

from smart_house.cli import main

if __name__ == "__main__":
    main(["demo"])
