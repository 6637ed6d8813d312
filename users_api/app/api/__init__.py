"""
API package.

``router`` mounts the endpoint routers; each resource lives in its own
module under ``endpoints``.
"""
