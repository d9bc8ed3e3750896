"""FastAPI integration for the precondition guards.

Translates :class:`preconditions.PreconditionError` raised inside request
handlers into structured JSON error responses.
"""
