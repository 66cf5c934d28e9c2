"""
Maintenance commands for the hosted project.
"""
