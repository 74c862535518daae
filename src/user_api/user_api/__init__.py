"""User API package.

A small JSON service over a single ``users`` table, organized the same way as
the rest of our Flask apps: thin controller, service layer, repository layer.
"""
