"""
API package containing the HTTP routes.

``router`` aggregates the domain routers served under ``/api``; the
liveness route in ``endpoints.health`` is mounted at the root.
"""
