"""
utils/ - Shared Helpers
=======================
Logging setup and display formatting used across all layers.
"""
