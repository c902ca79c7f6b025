import logging
from typing import Optional, Protocol

import httpx

from config.settings import settings

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def try_send(self, number: str, message: str) -> bool:
        """
        best-effort 전송: 한 번만 시도하고 성공 여부만 돌려줌.
        어떤 실패도 예외로 올리지 않는다.
        """
        ...


class WhatsAppClient:
    """보호자 WhatsApp 알림 게이트웨이 (POST {number, message})"""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url or settings.WHATSAPP_SERVICE_URL
        self.timeout = timeout if timeout is not None else settings.WHATSAPP_TIMEOUT
        self.transport = transport

    def try_send(self, number: str, message: str) -> bool:
        logger.info(f"Sending WhatsApp message to {number}...")
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(self.url, json={"number": number, "message": message})
        except httpx.HTTPError as e:
            logger.error(f"Error sending WhatsApp message: {e}")
            return False
        except Exception:
            logger.exception("Unexpected error sending WhatsApp message")
            return False

        if not r.is_success:
            logger.error(f"WhatsApp API error: {r.status_code} - {r.text}")
            return False

        logger.info("WhatsApp message sent successfully")
        return True


whatsapp_client = WhatsAppClient()
