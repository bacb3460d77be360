"""
Main application settings.

This module contains all main configuration parameters for the Enterprise Car Sales
scraper. Runtime settings are loaded from environment variables using python-dotenv,
with default values in case of missing variables. The search region itself lives
in a TOML file (``config.toml`` by default) and is read by load_search_region().

Attributes:
    BASE_DIR (Path): Base application directory (current working directory by default).
    LOGS_DIR (Path): Directory for storing application logs.
    OUTPUT_DIR (Path): Directory where the dated CSV file is written.
    CONFIG_FILE (Path): TOML file holding the [search] table.

    SITE_NAME (str): Value written to the Site column.
    SITE_BASE_URL (str): Dealer website base URL.
    OUTPUT_FILE_PREFIX (str): Prefix of the output file name.
    OUTPUT_DATE_FORMAT (str): strftime format of the date embedded in the file name.

    REQUEST_DELAY (float): Pause in seconds before each vehicle request.
    REQUEST_TIMEOUT (float): httpx timeout in seconds for every request.
    MAX_PAGES_TO_PARSE (int): Maximum number of listing pages to parse (0 - no limit).
    ITEM_ERROR_POLICY (str): "fail" aborts the run on a vehicle error, "skip" moves on.
    DEDUPLICATE_VINS (bool): Skip VINs already written during the current run.

    LOG_LEVEL (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    LOG_FILE (str): Log file name.
    LOG_FORMAT (str): Log entry format.
    LOG_DATE_FORMAT (str): Date and time format in logs.

Classes:
    ConfigError: Raised when the search configuration is missing or malformed.

Functions:
    load_search_region: Reads the search region from the TOML config file.
"""

import os
import tomllib
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from carsales_scraper.core.models import SearchRegion

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(os.getenv("BASE_DIR", os.getcwd()))
LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BASE_DIR)))
CONFIG_FILE = Path(os.getenv("SCRAPER_CONFIG_FILE", str(BASE_DIR / "config.toml")))

# Create directories if they don't exist
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Site settings
SITE_NAME = "Enterprise"
SITE_BASE_URL = "https://www.enterprisecarsales.com"
OUTPUT_FILE_PREFIX = "rentals"
OUTPUT_DATE_FORMAT = "%m%d%Y"

# Scraper settings
REQUEST_DELAY = float(os.getenv("REQUEST_DELAY", "1.0"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30.0"))
MAX_PAGES_TO_PARSE = int(os.getenv("MAX_PAGES_TO_PARSE", "0"))  # 0 - no limit
ITEM_ERROR_POLICY = os.getenv("ITEM_ERROR_POLICY", "fail").lower()
DEDUPLICATE_VINS = os.getenv("DEDUPLICATE_VINS", "true").lower() in ("1", "true", "yes")

ITEM_ERROR_POLICIES = ("fail", "skip")

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "scraper.log")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConfigError(Exception):
    """Search configuration is missing or malformed."""


def load_search_region(path: Optional[Union[str, Path]] = None) -> SearchRegion:
    """
    Read the search region from the [search] table of a TOML file.

    Expected layout::

        [search]
        zip = "60601"
        distance = 50

    Args:
        path (Optional[Union[str, Path]]): Config file path. Defaults to CONFIG_FILE.

    Returns:
        SearchRegion: Postal code and radius to crawl.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or the
            [search] table lacks a text ``zip`` or a non-negative integer ``distance``.
    """
    config_path = Path(path) if path is not None else CONFIG_FILE
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    search = data.get("search")
    if not isinstance(search, dict):
        raise ConfigError(f"Missing [search] table in {config_path}")

    zip_code = search.get("zip")
    distance = search.get("distance")
    if not isinstance(zip_code, str) or not zip_code.strip():
        raise ConfigError("search.zip must be a non-empty string")
    # bool is an int subclass in Python
    if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
        raise ConfigError("search.distance must be a non-negative integer")

    return SearchRegion(postal_code=zip_code.strip(), radius_miles=distance)
