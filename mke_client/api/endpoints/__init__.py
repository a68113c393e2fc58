"""
Typed MKE API endpoints, one module per resource.
"""
