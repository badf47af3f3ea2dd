"""
Version 1 of the API.

Bundles the book, author and category endpoints.  The routes are
mounted at the root by default (``/books``), or under
``settings.api_prefix`` when one is configured.
"""
