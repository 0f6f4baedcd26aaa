"""
Pydantic schema definitions for API payloads.

Schemas describe the records held in memory and the shape of query
results.  Request bodies are validated separately by
``services.validation`` so that every violation can be reported at once.
"""
