"""Config module - constants and YAML option files"""
