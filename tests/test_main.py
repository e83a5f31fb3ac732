# test_main.py

import logging
import os

import numpy as np

import constants
import main
from bounding_region import BoundingRegion


def test_sample_points_stay_in_padded_window():
    region = BoundingRegion([1, 1], [0, 0])
    points = main.sample_points(region, 300, 0.5, np.random.default_rng(0))

    assert points.shape == (300, 2)
    assert points.min() >= -0.5
    assert points.max() <= 1.5


def test_classify_points():
    region = BoundingRegion([0, 0], [1, 1])
    points = np.array([[0.5, 0.5], [1.0, 1.0], [2.0, 0.5], [-0.1, 0.0]])
    assert main.classify_points(region, points) == (2, 2)


def test_check_clamped_has_no_failures():
    region = BoundingRegion([3, -1, 0], [-3, 1, 5])
    points = main.sample_points(region, 200, 1.0, np.random.default_rng(5))
    assert main.check_clamped(region, points) == 0


def test_main_runs_from_config(run_config):
    inside, outside = main.main(str(run_config))

    assert inside + outside == 500
    assert inside > 0 and outside > 0

    # Same seed, same split.
    assert main.main(str(run_config)) == (inside, outside)

    logger = logging.getLogger(constants.LOGGER_NAME)
    for handler in logger.handlers:
        handler.flush()
    with open(os.path.join(constants.RUNS_DIR, "test_run", constants.LOG_FILE_NAME)) as f:
        contents = f.read()
    assert "Application shutting down." in contents
    assert f"Inside={inside}, Outside={outside}" in contents
