"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are omitted.

It lets tests import shared helpers as `tests.helpers...`; the test subdirectories work
as namespace packages (PEP 420), so they do not need their own __init__.py files.
"""
