"""Infrastructure layer.

Configuration, logging setup and the platform admin API client.
"""
