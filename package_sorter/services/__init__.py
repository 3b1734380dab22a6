# Services package init
"""
Package Sorter — Services Layer
=================================

What:  Business logic between the front ends (CLI, HTTP routes) and the
       domain values (models/package.py).

Service Inventory:
    - ClassifierService (classifier.py): validate → classify → decide → explain

Why services are separate from routes:
    The same service backs both the CLI and the API, and can be unit-tested
    without HTTP.
"""
