# main.py

import constants
import json
import logging
import logger_setup
import numpy as np
from bounding_region import BoundingRegion

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def sample_points(region: BoundingRegion, count: int, padding: float, rng: np.random.Generator) -> np.ndarray:
    """
    Draws `count` uniform points from a window around the region.
    The window is the region's box grown by `padding * extent` on each side,
    so a share of the samples lands outside.
    """
    lo = np.minimum(region.corner_a, region.corner_b) - padding * region.extent
    hi = np.maximum(region.corner_a, region.corner_b) + padding * region.extent
    return rng.uniform(lo, hi, (count, region.dimension))


def classify_points(region: BoundingRegion, points: np.ndarray):
    """Returns (inside_count, outside_count) for the given (N, D) points."""
    inside_mask = region.contains_points(points)
    inside = int(np.count_nonzero(inside_mask))
    return inside, len(inside_mask) - inside


def check_clamped(region: BoundingRegion, points: np.ndarray) -> int:
    """
    Clamps every point that falls outside the region and re-checks it.
    Returns the number of clamped points that still test as outside.
    """
    failures = 0
    outside = points[~region.contains_points(points)]
    for point in outside:
        clamped = region.clamp(point)
        if not region.contains(clamped):
            failures += 1
            logger.warning(f"Clamped point {clamped} is still outside {region}.")
    return failures


def main(config_path=constants.CONFIG_PATH):
    """
    Main function: builds the configured region and classifies a seeded batch
    of random points against it.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)
    sampling_config = config.get('sampling', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    region = BoundingRegion.from_config(config['region'])
    logger.info(f"Region initialized: {region}, extent={region.extent.tolist()}")

    point_count = sampling_config.get('point_count', constants.DEFAULT_POINT_COUNT)
    padding = sampling_config.get('padding', constants.DEFAULT_PADDING)
    points = sample_points(region, point_count, padding, rng)

    # --- Classification ---
    inside, outside = classify_points(region, points)
    fraction = inside / point_count if point_count else 0.0
    logger.info(f"Classified {point_count} points: Inside={inside}, Outside={outside}, InsideFraction={fraction:.3f}")

    failures = check_clamped(region, points)
    logger.info(f"Clamped {outside} outside point(s) back into the region, {failures} failed the re-check.")

    logger.info("Application shutting down.")
    return inside, outside

if __name__ == "__main__":
    main()
