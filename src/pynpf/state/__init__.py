"""State/store layer.

This package is the single source of truth for the calculator inputs: every
change reaches the current snapshot through the store, and every change is
announced to the store's subscribers.
"""
