# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import os
import tomli
import numba
import logging

logger = logging.getLogger(__name__.split(".")[0])

# Logging format
frmt = "[%(asctime)s] %(name)s:%(levelname)-8s - %(message)s"
formatter = logging.Formatter(frmt, datefmt="%H:%M:%S")

# Set up console logger
sh = logging.StreamHandler()
sh.setLevel(logging.DEBUG)
sh.setFormatter(formatter)
logger.addHandler(sh)

# Set logging level
logger.setLevel(logging.WARNING)
logging.root.setLevel(logging.NOTSET)


def _read_config():
    files = ["freefermions.toml", "ff.toml", "pyproject.toml"]
    for file in files:
        try:
            with open(file, "rb") as fh:
                data = tomli.load(fh)
            return dict(data["freefermions"])
        except (FileNotFoundError, KeyError):
            pass
    return dict()


def parse_num_threads(num_threads):
    if num_threads <= 0:
        num_threads = (os.cpu_count() or 1) + num_threads
    return max(1, min(num_threads, numba.config.NUMBA_NUM_THREADS))


def parse_config():
    data = _read_config()
    num_threads = parse_num_threads(data.get("numba_threads", -1))

    log_level = str(data.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "WARNING"

    hermitian_atol = float(data.get("hermitian_atol", 1e-10))

    return {
        "numba_threads": num_threads,
        "log_level": log_level,
        "hermitian_atol": hermitian_atol,
    }


CONFIG = parse_config()
HERMITIAN_ATOL = CONFIG["hermitian_atol"]

logger.setLevel(CONFIG["log_level"])
numba.set_num_threads(CONFIG["numba_threads"])
