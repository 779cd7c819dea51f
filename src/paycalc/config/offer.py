"""Offer input — one candidate delivery job."""

from pydantic import BaseModel, ConfigDict, Field


class OfferInput(BaseModel):
    """Raw offer parameters as shown on the delivery app's offer card.

    Only ``pay`` is required; stop counts default to a single pickup and a
    single drop, and a missing route means "no miles entered yet".
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    pay: float = Field(ge=0, description="Total offer pay including tip ($)")
    pickups: int = Field(default=1, ge=0, description="Number of pickups")
    drops: int = Field(default=1, ge=0, description="Number of drop-offs")
    miles: float = Field(default=0.0, ge=0, description="Total route distance (miles)")
    items: int = Field(default=0, ge=0, description="Shopping items (shop-and-deliver orders)")

    @property
    def is_evaluable(self) -> bool:
        """Whether callers should show an evaluation at all.

        Offers with no pay or no drops are valid input for the engine, but
        the UI and HTTP layers suppress their evaluation.
        """
        return self.pay > 0 and self.drops > 0

    @property
    def has_route(self) -> bool:
        return self.miles > 0
