"""Navbar Plus: configurable icon links and a reset tour link for the site navbar."""

__version__ = "0.1.0"
