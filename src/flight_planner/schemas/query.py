"""
Flight query schemas.

Defines the search request passed to the planner and the tabular
contract used to validate request files.
"""

from dataclasses import dataclass
from enum import Enum

import pandera as pa
from pandera.typing import DataFrame, Series


class Criterion(str, Enum):
    """Ranking dimension for a query. Values are the report labels."""

    TIME = "Time"
    COST = "Cost"

    @classmethod
    def from_code(cls, code: str) -> "Criterion":
        """
        Parse a request-file criterion code.

        `T` (any case) selects time ranking. Anything else, canonically `C`,
        selects cost ranking.
        """
        return cls.TIME if code.strip().upper() == "T" else cls.COST


@dataclass(frozen=True)
class FlightQuery:
    """
    Immutable route request.

    Attributes:
        origin: City the route starts from.
        destination: City the route ends at.
        criterion: Ranking dimension for the reported paths.
    """

    origin: str
    destination: str
    criterion: Criterion = Criterion.COST

    @classmethod
    def create(cls, origin: str, destination: str, code: str) -> "FlightQuery":
        """Factory method taking the raw criterion code from a request record."""
        return cls(
            origin=origin.strip(),
            destination=destination.strip(),
            criterion=Criterion.from_code(code),
        )


class QuerySchema(pa.DataFrameModel):
    """Contract for request records read from a request file."""

    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Origin city",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Destination city",
    )
    criterion: Series[str] = pa.Field(
        nullable=False,
        description="Criterion code, T for time, anything else for cost",
    )

    class Config:
        strict = False
        coerce = True
        name = "QuerySchema"


QueryDataFrame = DataFrame[QuerySchema]

QUERY_COLUMNS = ["origin", "destination", "criterion"]
