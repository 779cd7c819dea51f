"""Driver settings — the tunable parameters every evaluation reads.

One immutable value per driver.  Persisting it (YAML/JSON profile, request
body, environment) is the loader's job, not the engine's.
"""

from pydantic import BaseModel, ConfigDict, Field


class DriverSettings(BaseModel):
    """Time costs, speed, and pay targets used to judge an offer."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # --- Time per unit ---
    per_pickup: float = Field(default=5.0, ge=0, description="Minutes spent per pickup")
    per_drop: float = Field(default=2.0, ge=0, description="Minutes spent per drop-off")
    per_item: float = Field(default=1.5, ge=0, description="Minutes spent per shopping item")
    avg_speed: float = Field(
        default=35.0, gt=0,
        description="Average driving speed (mph) used to turn miles into minutes",
    )

    # --- Pay targets ---
    expected_pay: float = Field(
        default=21.0, ge=0,
        description="Target hourly rate ($/hr).  Effective hourly at or above this is GOOD.",
    )
    min_hourly_pay: float = Field(
        default=0.0, ge=0,
        description="Hourly floor ($/hr).  0 disables it and the floor becomes "
                    "'pay covers the required pay at the target rate'.  When > 0 "
                    "an offer is BAD only if its effective hourly drops below this.",
    )
    max_orders_per_hour: float = Field(
        default=3.0, gt=0,
        description="Most orders a driver can realistically finish in an hour.  "
                    "Caps the orders-per-hour multiplier for very short orders.",
    )

    # --- Return trip ---
    return_1_drop: float = Field(
        default=100.0, ge=0,
        description="Return leg as % of one-way travel time for single-drop orders",
    )
    return_2_drop: float = Field(
        default=50.0, ge=0,
        description="Return leg as % of one-way travel time for orders with 2+ drops",
    )

    # --- What-if only ---
    extra_wait_time: float = Field(
        default=0.0, ge=0,
        description="Assumed extra wait at each pickup (minutes).  Only used by "
                    "the what-if explorer, never by the verdict itself.",
    )

    def return_percent(self, drops: int) -> float:
        """Return-leg percentage for an order with ``drops`` drop-offs."""
        return self.return_2_drop if drops >= 2 else self.return_1_drop


DEFAULT_SETTINGS = DriverSettings()
"""Stock settings, shared by every caller that has no saved profile."""
