"""
Gas telemetry endpoint.

Sensor nodes POST MQ135/MQ2 readings to ``/api/status`` and dashboards poll
``GET /api/status`` for the newest ones.
"""

__version__ = "0.1.0"
