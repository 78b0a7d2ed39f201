"""
Configuration example: build a calculator from YAML settings
and measure several datasets with it.
"""

import sys

from config import load_config
from mathdistance import DistanceCalculator


DATASETS = [
    ([3, 4, 2, 1], [0, 5, 6, 9]),
    ([0.0, 0.0], [3.0, 4.0]),
    ([-2, 4], [0, 5]),
]


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    settings = load_config(config_path)
    logger = settings.configure_logging()

    calc = DistanceCalculator.from_settings(settings)
    logger.info(f"Using {calc.algorithm!r}")

    for a, b in DATASETS:
        print(f"{a} vs {b}: {calc.set_data(a, b).distance():.4f}")


if __name__ == "__main__":
    main()
