"""
Junket operations core.

Pure calculation and access-control layer for a junket dashboard:
- Role-based permission matrix (admin/agent/staff/boss)
- Trip profit sharing between agents and the house
- Customer net position and trip financial validation
"""

__version__ = "1.0.0"
