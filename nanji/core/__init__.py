"""
Core Package

Zone-agnostic logic shared by every command:
- Zone registry over the IANA tz database
- Alias resolver (built-in aliases + config overrides)
- Time-of-day parsing and local-time-to-UTC conversion
- Configuration, logging, schemas and error types
"""
