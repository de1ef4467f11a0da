"""
Aggregate results of a simulation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass

import pandas as pd

from .snapshot import Snapshot
from .utils import epoch_day_to_date


@dataclass(frozen=True)
class DataPoint:
    """
    Aggregate figures for one day.

    Attributes:
        assets: Sum of all positive entity values
        debt: Sum of the absolute values of all negative entity values
        net_worth: ``assets - debt``
    """

    assets: float
    debt: float
    net_worth: float


DataPointsByDay = dict[int, DataPoint]


def data_points_to_frame(points: Mapping[int, DataPoint]) -> pd.DataFrame:
    """
    Tidy DataFrame of data points indexed by calendar date.

    Columns: ``day`` (epoch day), ``assets``, ``debt``, ``net_worth``.
    """
    rows = [{"day": day, **asdict(point)} for day, point in sorted(points.items())]
    df = pd.DataFrame(rows, columns=["day", "assets", "debt", "net_worth"])
    df.index = pd.DatetimeIndex(
        [pd.Timestamp(epoch_day_to_date(d)) for d in df["day"]], name="date"
    )
    return df


def snapshots_to_frame(snapshots: Iterable[Snapshot]) -> pd.DataFrame:
    """
    Tidy DataFrame of one entity's snapshot history indexed by calendar date.

    Columns: ``day``, ``amount``, ``share_quantity``, ``share_price``, ``value``.
    """
    rows = [{**asdict(s), "value": s.value} for s in snapshots]
    df = pd.DataFrame(
        rows, columns=["day", "amount", "share_quantity", "share_price", "value"]
    )
    df.index = pd.DatetimeIndex(
        [pd.Timestamp(epoch_day_to_date(d)) for d in df["day"]], name="date"
    )
    return df
