"""
Services for extinit.

This package contains the initializer and the reference collaborators it
works with, each in its own subpackage:
- initialization/: the initializer, its chain context and per-call state
- handlers/: dispatch of activations to per-type handlers
- repositories/: in-memory installed/core repositories and manifest loading
"""
