"""Dictionary-driven translator between Common and Drow."""
__version__ = '0.1.0'
