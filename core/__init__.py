"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and the clock port
- Transaction helpers
- Observability middleware and metrics
- Health views
"""
