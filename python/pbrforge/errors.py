# python/pbrforge/errors.py
# Exception types raised by the material synthesis API.
# Exists so callers can tell which generation parameter was rejected.
# RELEVANT FILES:python/pbrforge/_validate.py,python/pbrforge/params.py,tests/test_params.py

from __future__ import annotations


class InvalidParameterError(ValueError):
    """A generation parameter violates the caller contract.

    Subclasses ValueError so generic ``except ValueError`` handlers keep working.
    ``field`` names the offending parameter.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
