"""Composable shell prompt built from format strings and project detection"""

__version__ = "0.1.0"
