"""
Root package of the Enterprise Car Sales scraper.

This package contains all application components for collecting used vehicle
inventory from the enterprisecarsales.com website into a dated CSV file.

Package structure:
    config: Configuration (environment settings, search region loading).
    core: Data models and CSV output.
    scraper: Data collection components (parsers, crawl loop).
    utils: Helper utilities (logging, HTML text extraction).
"""

__version__ = "0.1.0"
