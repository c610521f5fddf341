from datetime import tzinfo

from pydantic import BaseModel, field_validator

from src.domain.clock import load_timezone
from src.domain.entities import MonthlyOverflow, SyncScope
from src.domain.occurrences import LOCALE_NAMES


class SchedulingPolicy(BaseModel):
    """Tunable scheduling behaviour, built from ApplicationConfig"""

    timezone: str = "UTC"
    horizon_days: int = 30
    name_locale: str = "id"
    monthly_overflow: MonthlyOverflow = MonthlyOverflow.clamp
    sibling_sync_scope: SyncScope = SyncScope.future_only
    template_sync_scope: SyncScope = SyncScope.all
    derive_window_from_session_times: bool = False

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        load_timezone(value)
        return value

    @field_validator("name_locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        if value not in LOCALE_NAMES:
            raise ValueError(f"Unsupported locale: {value}")
        return value

    @field_validator("horizon_days")
    @classmethod
    def _positive_horizon(cls, value: int) -> int:
        if value < 1:
            raise ValueError("horizon_days must be at least 1")
        return value

    @property
    def tz(self) -> tzinfo:
        return load_timezone(self.timezone)

    @classmethod
    def from_config(cls, config) -> "SchedulingPolicy":
        return cls(
            timezone=config.TIMEZONE,
            horizon_days=config.GENERATION_HORIZON_DAYS,
            name_locale=config.OCCURRENCE_NAME_LOCALE,
            monthly_overflow=config.MONTHLY_OVERFLOW_POLICY,
            sibling_sync_scope=config.SIBLING_SYNC_SCOPE,
            template_sync_scope=config.TEMPLATE_SYNC_SCOPE,
            derive_window_from_session_times=config.DERIVE_WINDOW_FROM_SESSION_TIMES,
        )
