# Routes package init
"""
Package Sorter — API Routes Package
=====================================

Route Inventory:
    - classify.py:  GET/POST /api/v1/packages/classify      (classify a package)
                    GET      /api/v1/packages/classify/{w}/{h}/{l}/{m}
    - info.py:      GET      /api/v1/packages/info          (usage and rules)
    - health.py:    GET      /health                        (liveness)

Routes are thin: parse numbers, call classifier_service, return a schema.
Errors are formatted by the global exception handlers in main.py.
"""
