"""
The scraper package contains data collection components.

Implementation uses httpx for HTTP requests and BeautifulSoup for HTML parsing.

Modules:
    base: Abstract base class for all parsers.
    enterprise: Crawl loop for the enterprisecarsales.com website.

Subpackages:
    parsers: Specialized parsers for different types of pages:
        - search_page: Search page parser (VIN listings).
        - vehicle_api: Vehicle JSON API record parser.
        - vehicle_page: Vehicle detail page parser.
"""
