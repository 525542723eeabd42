"""
matchday_relay – reliable webhook delivery for club content payloads.

Import path convention::

    from matchday_relay.application.webhooks import DeliveryEngine
    from matchday_relay.config import RelaySettings, SettingsFactory
    from matchday_relay.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
