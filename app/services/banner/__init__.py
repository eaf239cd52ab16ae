"""
Institution banner handling: field validation, request middleware and
response shaping.
"""
