"""
Flight leg schemas using Pandera.

Defines the contract for edge-list data flowing into the network.
Schema validation happens at the provider boundary only, not per-leg.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import DataFrame, Series


class LegSchema(pa.DataFrameModel):
    """
    Contract for the undirected edge list.

    Each row declares one direct flight between two cities. The network
    inserts it in both directions with identical weights.
    """

    city_a: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="First endpoint city",
    )
    city_b: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Second endpoint city",
    )
    cost: Series[float] = pa.Field(
        ge=0,
        description="Monetary cost of the leg (may be fractional)",
    )
    time: Series[int] = pa.Field(
        ge=0,
        description="Duration of the leg in whole units",
    )

    class Config:
        strict = False
        coerce = True
        name = "LegSchema"
        ordered = True


LegDataFrame = DataFrame[LegSchema]

LEG_COLUMNS = ["city_a", "city_b", "cost", "time"]


@dataclass(frozen=True)
class Leg:
    """
    One directed entry of an undirected flight connection.

    The source city is implied by the network key it is stored under.
    """

    to: str
    cost: float
    time: int
