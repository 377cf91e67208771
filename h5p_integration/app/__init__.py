"""
FastAPI application for the H5P integration service.
"""
