"""
The core package contains base application components.

Modules:
    models: Dataclasses for the search region and vehicle records.
    output: CSV sink for vehicle records.
"""
