"""Packfinder - resolve ActionScript class names to package paths."""

from packfinder.config import ResolverConfig
from packfinder.resolver import Resolver, find_package, list_package

__version__ = "0.1.0"
__all__ = ["find_package", "list_package", "Resolver", "ResolverConfig"]
