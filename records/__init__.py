"""Records application for the front-desk backend.

This package contains the document models, serializers, store adapter,
views and route registrations implementing the API contract expected by
the front-desk client.
"""
