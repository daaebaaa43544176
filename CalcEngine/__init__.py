"""
Arithmetic calculation engine.

Scans, normalizes, parses and evaluates '+ - * / ( )' expressions over
named variables and renders the result as a trimmed decimal string.
"""

from .MathEngine import Calculation, create_session

__all__ = ['Calculation', 'create_session']
