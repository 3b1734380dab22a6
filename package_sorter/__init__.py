"""
Package Sorter — Application Package Initializer
==================================================

What: Classifies packages into STANDARD, SPECIAL or REJECTED stacks from
      their dimensions and mass, via a CLI and an HTTP API.

Architecture Note:

    ┌─────────────────────────────────────┐
    │   cli.py          routes/ (HTTP)    │  ← parsing and rendering only
    ├─────────────────────────────────────┤
    │   services/classifier.py            │  ← the classification rules
    ├─────────────────────────────────────┤
    │   models/package.py                 │  ← validated, immutable values
    └─────────────────────────────────────┘

    Both front ends call services.classifier.classifier_service.evaluate(),
    so the CLI and the API can never disagree about a package.
"""

__version__ = "1.0.0"
