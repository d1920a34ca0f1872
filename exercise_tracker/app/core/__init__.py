"""
Core infrastructure shared by the services and the API layer.
"""
