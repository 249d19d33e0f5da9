"""Chart index maintenance layer.

This module merges release values into chart entries and appends them
to index documents. It also emits starter templates for new charts.
"""
