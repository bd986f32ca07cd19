"""Flavor-text tips with a guaranteed fallback."""

import logging
import random
from typing import Callable, Optional, Sequence

from klinecamp.core.interfaces import TipProvider

logger = logging.getLogger(__name__)

DEFAULT_TIP = "记住：顺势而为，止损第一。"
ERROR_TIP = "多看少动，等待机会。"
EMPTY_TIP = "顺势而为。"

STATIC_TIPS = (
    DEFAULT_TIP,
    "截断亏损，让利润奔跑。",
    "量在价先，背离必有因。",
    "不在震荡市里追涨杀跌。",
)


class StaticTipProvider(TipProvider):
    def __init__(self, tips: Sequence[str] = STATIC_TIPS, rng: Optional[random.Random] = None) -> None:
        if not tips:
            raise ValueError("tips must not be empty")
        self._tips = tuple(tips)
        self._rng = rng or random.Random()

    def tip(self) -> str:
        return self._rng.choice(self._tips)


class FallbackTipProvider(TipProvider):
    """
    Wraps an external text source.

    No source configured yields ``unavailable``, a failing source yields
    ``on_error`` and an empty answer yields ``on_empty``. Nothing propagates.
    """

    def __init__(
        self,
        source: Optional[Callable[[], Optional[str]]] = None,
        *,
        unavailable: str = DEFAULT_TIP,
        on_error: str = ERROR_TIP,
        on_empty: str = EMPTY_TIP,
    ) -> None:
        self._source = source
        self.unavailable = unavailable
        self.on_error = on_error
        self.on_empty = on_empty

    def tip(self) -> str:
        if self._source is None:
            return self.unavailable
        try:
            text = self._source()
        except Exception:  # noqa: BLE001 - any collaborator failure degrades to the fallback
            logger.warning("Tip source failed; using fallback", exc_info=True)
            return self.on_error
        text = (text or "").strip()
        return text or self.on_empty
