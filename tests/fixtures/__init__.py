"""Shared pytest fixtures for storefront tests."""

from .catalog import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
