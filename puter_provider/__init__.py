"""
puter-provider - Puter AI gateway adapter and model picker.
"""

__version__ = "0.1.0"
