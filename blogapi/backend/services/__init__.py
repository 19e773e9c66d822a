"""
Service Layer.

Business logic between the HTTP endpoints and the blog store.
"""
