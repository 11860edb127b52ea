"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the prompt loop depends on abstractions.
"""
