"""Shared chart-index foundations.

This module holds configuration, errors, logging, typed models, and
YAML document IO used by the index and CLI layers.
"""
