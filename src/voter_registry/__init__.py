"""VOTER REGISTRY

Validates voter-registration candidates against eligibility rules (legal age,
alive status, valid identifier, not already registered) and records accepted
voters in durable storage.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
