"""
Link attribute tools for OSM network imports
"""
