# services/alert_distributor.py
"""
Alert Distributor Service

Dispatches a public alert to notification channels:
- SMS gateway
- App push notifications

Each requested channel gets its own delivery record so partial failures
are visible to the caller.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from datetime import datetime
import asyncio
import logging

from models.model import Alert, ChannelDelivery

logger = logging.getLogger("mpulse.alert_distributor")


class AlertChannel(ABC):
    """Base class for alert distribution channels"""

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Name of this channel"""
        pass

    @abstractmethod
    async def send(self, alert_id: str, alert: Optional[Alert]) -> ChannelDelivery:
        """
        Send an alert through this channel

        Args:
            alert_id: Identifier of the alert being broadcast
            alert: Stored alert, if known, used to build the message

        Returns:
            ChannelDelivery with success/failure status
        """
        pass

    @abstractmethod
    def format_message(self, alert_id: str, alert: Optional[Alert]) -> str:
        """Format alert for this channel"""
        pass


class SMSChannel(AlertChannel):
    """Send alerts via SMS gateway"""

    def __init__(self, sender_id: str = "MPULSE"):
        self.sender_id = sender_id

    @property
    def channel_name(self) -> str:
        return "SMS"

    def format_message(self, alert_id: str, alert: Optional[Alert]) -> str:
        """Format alert for SMS (160 char limit for single SMS)"""
        if alert is None:
            return f"M-Pulse health alert {alert_id}"[:160]
        return f"{alert.title}\n{alert.message}"[:160]

    async def send(self, alert_id: str, alert: Optional[Alert]) -> ChannelDelivery:
        message = self.format_message(alert_id, alert)

        # Gateway integration point; the message is only logged here
        logger.info(f"SMS broadcast {alert_id} from {self.sender_id}: {message[:50]}...")

        return ChannelDelivery(
            channel=self.channel_name,
            success=True,
            timestamp=datetime.now(),
            message_id=f"sms-{datetime.now().strftime('%Y%m%d%H%M%S')}-{alert_id[:8]}"
        )


class AppPushChannel(AlertChannel):
    """Push notification to dashboard app users"""

    def __init__(self, topic: str = "public-health"):
        self.topic = topic

    @property
    def channel_name(self) -> str:
        return "App"

    def format_message(self, alert_id: str, alert: Optional[Alert]) -> str:
        if alert is None:
            return alert_id
        return alert.title

    async def send(self, alert_id: str, alert: Optional[Alert]) -> ChannelDelivery:
        message = self.format_message(alert_id, alert)
        logger.info(f"App push to topic {self.topic}: {message}")

        return ChannelDelivery(
            channel=self.channel_name,
            success=True,
            timestamp=datetime.now(),
            message_id=f"push-{self.topic}-{alert_id[:8]}"
        )


class AlertDistributor:
    """
    Distribute one alert across the requested channels concurrently.

    Channel names are matched case-insensitively; a name with no
    configured channel is reported as a failed delivery.
    """

    def __init__(self, channels: Optional[List[AlertChannel]] = None):
        channels = channels if channels is not None else [SMSChannel(), AppPushChannel()]
        self.channels: Dict[str, AlertChannel] = {}
        for channel in channels:
            self.add_channel(channel)

        logger.info(f"AlertDistributor initialized with {len(self.channels)} channels")

    async def distribute(self,
                         alert_id: str,
                         channel_names: List[str],
                         alert: Optional[Alert] = None) -> List[ChannelDelivery]:
        """
        Send an alert to every requested channel

        Returns:
            One ChannelDelivery per requested channel, in request order
        """
        tasks = [self._send_safe(alert_id, name, alert) for name in channel_names]
        deliveries = await asyncio.gather(*tasks)

        failed = [d.channel for d in deliveries if not d.success]
        if failed:
            logger.warning(f"Alert {alert_id} failed on channels: {', '.join(failed)}")
        return list(deliveries)

    async def _send_safe(self,
                         alert_id: str,
                         channel_name: str,
                         alert: Optional[Alert]) -> ChannelDelivery:
        """Send with error handling"""
        channel = self.channels.get(channel_name.lower())
        if channel is None:
            return ChannelDelivery(
                channel=channel_name,
                success=False,
                timestamp=datetime.now(),
                error=f"Channel {channel_name} not configured"
            )

        try:
            return await channel.send(alert_id, alert)
        except Exception as e:
            logger.error(f"Send failed via {channel_name}: {e}")
            return ChannelDelivery(
                channel=channel.channel_name,
                success=False,
                timestamp=datetime.now(),
                error=str(e)
            )

    def add_channel(self, channel: AlertChannel):
        """Add (or replace) a distribution channel"""
        self.channels[channel.channel_name.lower()] = channel

    def get_available_channels(self) -> List[str]:
        """Get list of available channel names"""
        return [channel.channel_name for channel in self.channels.values()]


# Factory function
def create_alert_distributor(channels: Optional[List[AlertChannel]] = None) -> AlertDistributor:
    """Create an AlertDistributor instance"""
    return AlertDistributor(channels=channels)
