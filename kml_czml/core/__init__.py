"""Core utilities and shared infrastructure.

- config: Converter configuration loading and validation
- constants: Named constants (CZML defaults, placeholder image)
- exceptions: Custom exception hierarchy
- ingress: HTTP upload boundary helpers
"""
