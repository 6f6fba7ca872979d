"""Prefect flows.

- report: geocode -> fetch archive -> analyze -> render -> write index.html
"""
