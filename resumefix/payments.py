"""
Razorpay client: order creation, payment verification and webhook checks.
"""

import hashlib
import hmac
import logging
import time
from typing import Any, Dict, Optional

import httpx

from .config import RazorpayConfig
from .exceptions import PaymentNotConfiguredError

logger = logging.getLogger(__name__)

VERIFIED_STATUSES = {"captured", "authorized"}


class RazorpayClient:
    """Thin async wrapper over the Razorpay REST API."""

    def __init__(self, config: RazorpayConfig, transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = 30.0):
        self.config = config
        self.transport = transport
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            auth=(self.config.key_id or "", self.config.key_secret or ""),
            timeout=self.timeout,
            transport=self.transport,
        )

    async def create_order(self, amount_in_paise: Optional[int] = None) -> Dict[str, Any]:
        """Create an order the checkout widget can be opened with."""
        if not self.is_configured:
            raise PaymentNotConfiguredError("Razorpay keys not set")

        payload = {
            "amount": amount_in_paise or self.config.default_amount_in_paise,
            "currency": self.config.currency,
            "receipt": f"srfix_{int(time.time() * 1000)}",
            "payment_capture": 1,
        }

        async with self._client() as client:
            response = await client.post("/orders", json=payload)
            response.raise_for_status()
            return response.json()

    async def fetch_payment_status(self, payment_id: str) -> Optional[str]:
        """Gateway status of a payment, or None when it cannot be fetched."""
        try:
            async with self._client() as client:
                response = await client.get(f"/payments/{payment_id}")
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Payment verify error for {payment_id}: {e}")
            return None

        if not isinstance(data, dict):
            return None
        return data.get("status")

    async def is_verified(self, payment_id: str) -> bool:
        """True when the payment is captured or authorized."""
        status = await self.fetch_payment_status(payment_id)
        verified = status in VERIFIED_STATUSES
        if not verified:
            logger.warning(f"Payment {payment_id} not verified (status={status})")
        return verified

    def verify_webhook_signature(self, body: bytes, signature: Optional[str]) -> bool:
        """
        Check the X-Razorpay-Signature header against the raw request body.

        Without a configured webhook secret every payload is accepted.
        """
        secret = self.config.webhook_secret
        if not secret:
            return True
        if not signature:
            return False

        expected = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
        return hmac.compare_digest(expected, signature)
