"""Repositories for loading structures."""
