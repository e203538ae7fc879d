"""
nanji

Show a moment in time across many timezones, either "now" or a wall-clock
time given in a base zone, labeled with IANA names or short aliases.
"""

__version__ = "0.1.0"
