"""
API package containing the HTTP routes.

``router`` aggregates the domain routers defined in ``endpoints``.  The
routes are mounted at the application root because clients address
``/users`` directly.
"""
