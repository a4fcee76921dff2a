"""Test-only providers and the container builder.

Importing MockPersistenceProvider registers it as a subclass of
PersistenceProvider, which build_test_container relies on.
"""

from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
