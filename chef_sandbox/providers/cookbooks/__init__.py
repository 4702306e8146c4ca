"""Cookbook resolver implementations and selection."""

from chef_sandbox.providers.cookbooks.base import CookbookResolver
from chef_sandbox.providers.cookbooks.berkshelf import BerkshelfResolve
from chef_sandbox.providers.cookbooks.librarian import LibrarianResolve
from chef_sandbox.providers.cookbooks.selector import find_marker, select_resolver
from chef_sandbox.providers.cookbooks.vendored import (
    SingleCookbookWrap,
    VendoredCopy,
    read_cookbook_name,
)

__all__ = [
    "BerkshelfResolve",
    "CookbookResolver",
    "LibrarianResolve",
    "SingleCookbookWrap",
    "VendoredCopy",
    "find_marker",
    "read_cookbook_name",
    "select_resolver",
]
