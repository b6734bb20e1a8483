"""
Configuration for the developer tools installer.
"""
