"""
The config package contains application settings.

Modules:
    settings: Paths, scraping and logging parameters, and search region loading.
"""
