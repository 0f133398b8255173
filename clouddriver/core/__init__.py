"""Core: config, lifespan, and exception handlers.

Single place for settings and application bootstrap.
"""
