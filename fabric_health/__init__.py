"""
Typed data model and wire codec for cluster health chunk queries.

Build filters from ``fabric_health.domain.entities`` and convert them with
``fabric_health.application.serialization.json_codec``.
"""

__version__ = "0.1.0"
