"""
API module - REST endpoints, serializers and error mapping.
"""
