"""
Shared service utilities.

- http.py - requests session with a uniform default timeout, used by every
  outbound call in datasources/.
"""
