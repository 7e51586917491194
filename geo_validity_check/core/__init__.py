"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (minimum sizes, backend names, env vars)
- exceptions: Custom exception hierarchy
"""
