"""Storefront API: HTTP entry point for the e-commerce platform."""

__version__ = "0.1.0"
