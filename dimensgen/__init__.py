"""
dimensgen — smallest-width dimension resource generator.
"""

__version__ = "0.1.0"
