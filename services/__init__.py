"""
services/ - Service Layer
=========================
Entry points used by the dashboard pages. Services call repositories
and never issue SQL themselves.
"""
