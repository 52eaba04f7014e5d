"""Database package for FloraScan.

Database components should be imported directly from their modules:
from florascan.database.core import DatabaseService
"""
