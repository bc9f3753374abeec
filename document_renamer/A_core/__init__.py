"""
A_core: Domain models, exceptions, and logging.

Core abstractions for the document renamer including:
- Pydantic domain models (date tokens, physician mentions, document types)
- Exception hierarchy rooted at RenamerError
- Centralized logging configuration
"""
