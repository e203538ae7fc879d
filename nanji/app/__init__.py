"""
Application Package

Command-line entry points (nanji, nanji-list-tz) and the command flows they
dispatch to.
"""
