"""
Shared service utilities.

- http.py - requests session factory with a default timeout
"""
