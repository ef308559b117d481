"""Monetary domain package.

This package contains the `Money` value type (integer cents plus a 3-character
currency code), its text parsing and formatting, and the errors it reports.
"""
