import pandera.pandas as pa
from pandera.typing import Series
from pandera.api.pandas.model_config import BaseConfig


class HoldingsExportSchema(pa.DataFrameModel):
    """
    Data contract for the holdings table behind the "download CSV" action.

    One row per position; the per-account breakdown is flattened to text.
    """

    symbol: Series[str] = pa.Field(nullable=False, str_length={"min_value": 1})
    market_value: Series[float] = pa.Field(nullable=False)
    percentage: Series[float] = pa.Field(nullable=False)
    gain_percent: Series[float] = pa.Field(nullable=True)
    profit: Series[float] = pa.Field(nullable=False)
    average_cost: Series[float] = pa.Field(nullable=True)
    shares: Series[float] = pa.Field(nullable=False)
    last_price: Series[float] = pa.Field(nullable=True)
    currency: Series[str] = pa.Field(nullable=True)
    accounts: Series[str] = pa.Field(nullable=False)

    class Config(BaseConfig):
        strict = True
        coerce = True
