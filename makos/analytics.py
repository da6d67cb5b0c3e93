"""Google Ads conversion tracking."""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel

logger = logging.getLogger(__name__)

GA_ADS_ID = "AW-778442301"

# Conversion IDs
CONVERSION_IDS = {
    "SIGN_UP": "AW-778442301/EhjuCIqUoPAbEL2smPMC",
    "PURCHASE": "AW-778442301/QKNICOGmoPAbEL2smPMC",
}


class ConversionEvent(BaseModel):
    send_to: str
    value: float
    currency: str
    transaction_id: Optional[str] = None


class Gtag:
    """
    Per-page stand-in for the global ``gtag`` function.

    Commands are queued here and replayed by the layout once the tag script
    has loaded. Without a measurement id the tag script is not on the page,
    so the queue stays disabled and drops everything.
    """

    def __init__(self, measurement_id: Optional[str] = None):
        self.measurement_id = measurement_id
        self.commands: List[Tuple[Any, ...]] = []

    @property
    def enabled(self) -> bool:
        return bool(self.measurement_id)

    def __call__(self, *args: Any) -> None:
        if self.enabled:
            self.commands.append(args)


def _send_conversion(gtag: Optional[Gtag], event: ConversionEvent) -> bool:
    if gtag is None or not gtag.enabled:
        return False
    try:
        gtag("event", "conversion", event.model_dump(exclude_none=True))
    except Exception as e:
        logger.debug(f"Dropping conversion {event.send_to}: {e}")
        return False
    return True


def track_sign_up(gtag: Optional[Gtag]) -> None:
    event = ConversionEvent(
        send_to=CONVERSION_IDS["SIGN_UP"], value=1.0, currency="TRY"
    )
    if _send_conversion(gtag, event):
        logger.info("Sign up conversion tracked")


def track_purchase(
    gtag: Optional[Gtag], value: float = 1.0, transaction_id: Optional[str] = None
) -> None:
    event = ConversionEvent(
        send_to=CONVERSION_IDS["PURCHASE"],
        value=value,
        currency="USD",
        transaction_id=transaction_id or "",
    )
    if _send_conversion(gtag, event):
        logger.info(
            f"Purchase conversion tracked (value={value}, transaction={transaction_id})"
        )
