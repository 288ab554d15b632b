"""Test helpers package."""

from tests.helpers.backend import FakeBackend

__all__ = ["FakeBackend"]
