"""
Services Package

Output side of the tool: rendering an instant across a list of zones.
"""
