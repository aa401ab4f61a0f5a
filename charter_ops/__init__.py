"""
Charter operations core for the yacht club admin: charter phase tracking,
crew assignment and admin interventions.
"""
__version__ = "1.0.0"
