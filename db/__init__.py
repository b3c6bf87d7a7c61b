"""
db/ - Database Layer
====================
Handles all PostgreSQL connections, schema initialization, and seed data.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
