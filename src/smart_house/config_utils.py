"""Configuration utilities for Smart House."""

from pathlib import Path

from pydantic import ValidationError

from smart_house.config import CONFIG_FILENAME, find_config_dir, load_config

EXAMPLE_CONFIG = """\
# Smart House configuration

name: "Дом, милый дом"

# Device groups are built once and shared by every room that names them
device_groups:
  aquarium:
    - name: розетка для аквариума
      type: socket
    - name: термометр для аквариума
      type: thermometer

rooms:
  - name: Зал
    devices:
      - name: розетка для телевизора
        type: socket

  - name: Кухня
    device_group: aquarium

  - name: Кладовка
    devices:
      - name: термометр для самогонного аппарата
        type: thermometer
        status: online
"""


def validate_config(config_dir: str | None = None) -> bool:
    """Validate the house configuration.

    Loads the config, builds the house from it and renders its report, so
    any error a later ``report`` would hit is caught here.

    Args:
        config_dir: Path to config directory

    Returns:
        True if valid, False otherwise
    """
    from smart_house.builder import build_house
    from smart_house.errors import SmartHouseError

    cfg_path = Path(config_dir) if config_dir else find_config_dir()

    print(f"Validating configuration in: {cfg_path}")
    print()

    errors = []
    warnings = []

    config_file = cfg_path / CONFIG_FILENAME
    if not config_file.exists():
        errors.append(f"{CONFIG_FILENAME} not found at {config_file}")
    else:
        print(f"✓ Found {CONFIG_FILENAME}")

        try:
            config = load_config(cfg_path)
            print(f"✓ {CONFIG_FILENAME} is valid")
            print(f"  House: {config.name}")
            print(f"  Rooms: {len(config.rooms)}")
            print(f"  Device groups: {len(config.device_groups)}")

            if not config.rooms:
                warnings.append("No rooms defined")

            used_groups = {r.device_group for r in config.rooms if r.device_group}
            for group_name in config.device_groups:
                if group_name not in used_groups:
                    warnings.append(f"Device group '{group_name}' is not used by any room")

            house = build_house(config)
            house.create_report()
            print("✓ House builds and reports")
        except ValidationError as e:
            errors.append(f"Failed to parse {CONFIG_FILENAME}: {e}")
        except SmartHouseError as e:
            errors.append(str(e))

    print()

    if errors:
        print("Errors:")
        for e in errors:
            print(f"  ✗ {e}")
        print()

    if warnings:
        print("Warnings:")
        for w in warnings:
            print(f"  ⚠ {w}")
        print()

    if not errors:
        print("✓ Configuration is valid")
        return True
    else:
        print("✗ Configuration has errors")
        return False


def init_config(config_dir: str = "./config") -> None:
    """Create an example configuration file.

    Args:
        config_dir: Path to config directory
    """
    cfg_path = Path(config_dir)

    print(f"Initializing configuration in: {cfg_path}")
    print()

    if not cfg_path.exists():
        cfg_path.mkdir(parents=True)
        print(f"✓ Created directory: {cfg_path}")

    config_file = cfg_path / CONFIG_FILENAME
    if config_file.exists():
        print(f"⚠ {CONFIG_FILENAME} already exists, skipping")
    else:
        config_file.write_text(EXAMPLE_CONFIG, encoding="utf-8")
        print(f"✓ Created {CONFIG_FILENAME}")

    print()
    print("Next steps:")
    print(f"  1. Edit {config_file} with your rooms and devices")
    print("  2. Run 'smart-house config validate' to check your config")
    print("  3. Run 'smart-house report' to print the house report")
