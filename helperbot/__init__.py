"""
Subject Helper Bot: subject forums, helper roles and helper pings for Discord.
"""

__version__ = "1.0.0"
