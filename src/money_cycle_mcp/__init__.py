"""
Money Cycle MCP: currency formatting and credit card billing cycle dates.
"""

__version__ = "0.1.0"
