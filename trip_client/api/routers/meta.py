from fastapi import APIRouter

from trip_client.api.models.schemas import CURRENCY_SYMBOLS
from trip_client.core.config import settings

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/currencies")
async def list_currencies():
    return [{"code": code, "symbol": symbol} for code, symbol in CURRENCY_SYMBOLS.items()]


@router.get("/limits")
async def list_limits():
    return {
        "maxDurationDays": settings.max_duration_days,
        "defaultCurrency": settings.default_currency,
        "searchDebounceMs": settings.search_debounce_ms,
    }
