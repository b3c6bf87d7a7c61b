"""
models/ - Domain Models
=======================
Read-only view records returned by the repositories.
Amounts are kept exactly as the layer received them; nothing here mutates state.
"""
