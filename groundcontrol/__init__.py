"""Ground station core: flight types, telemetry packets, a batched SQLite flight log and control modes."""

__version__ = "0.1.0"