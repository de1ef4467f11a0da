"""
Chart functions for visualizing plan projections.

This module provides charts at two levels:
- Plan level: year-end net worth, assets and debt
- Entity level: the snapshot history of individual entities

All chart functions return (figure, tidy_dataframe_used) for consistency.
"""

from __future__ import annotations

import pandas as pd

# Plotly imports with graceful fallback
try:
    import plotly.express as px
    import plotly.graph_objects as go

    PLOTLY_AVAILABLE = True
except ImportError:
    PLOTLY_AVAILABLE = False


def _check_plotly() -> None:
    """Check if Plotly is available and raise helpful error if not."""
    if not PLOTLY_AVAILABLE:
        raise ImportError(
            "Plotly is required for chart functions. Install with:\n"
            "pip install plotly kaleido\n"
            "or\n"
            "pip install 'finplanlab[viz]'"
        )


def _tidy(frame: pd.DataFrame) -> pd.DataFrame:
    """Move a ``date`` index into a column so plotly can address it."""
    if "date" in frame.columns:
        return frame.copy()
    return frame.reset_index()


# =============================================================================
# Plan-level charts
# =============================================================================


def net_worth_vs_time(frame: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot year-end net worth over the projection window.

    **Use Cases:**
    - See when a plan crosses zero net worth
    - Compare plans side by side (add a ``plan_name`` column and concatenate)

    **Args:**
        frame: DataFrame from `Plan.yearly()` / `Simulation.yearly()`

    **Returns:**
        Tuple of (plotly_figure, tidy_dataframe_used)

    **Example:**
        ```python
        from finplanlab import load_plan, net_worth_vs_time

        plan = load_plan("plan.yaml").simulate()
        fig, data = net_worth_vs_time(plan.yearly())
        fig.show()
        ```
    """
    _check_plotly()

    tidy = _tidy(frame)
    fig = px.line(
        tidy,
        x="date",
        y="net_worth",
        color="plan_name" if "plan_name" in tidy.columns else None,
        title="Net Worth Over Time",
        labels={"net_worth": "Net Worth", "date": "Date"},
    )

    fig.update_layout(hovermode="x unified", legend_title="Plan")

    return fig, tidy


def assets_vs_debt(frame: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Stacked view of assets above zero and debt below zero, with a net worth line.

    Args:
        frame: DataFrame from `Plan.yearly()` / `Simulation.yearly()`

    Returns:
        Tuple of (plotly_figure, tidy_dataframe_used)
    """
    _check_plotly()

    tidy = _tidy(frame)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=tidy["date"], y=tidy["assets"], name="Assets"))
    fig.add_trace(go.Bar(x=tidy["date"], y=-tidy["debt"], name="Debt"))
    fig.add_trace(
        go.Scatter(
            x=tidy["date"],
            y=tidy["net_worth"],
            name="Net Worth",
            mode="lines+markers",
        )
    )

    fig.update_layout(
        title="Assets vs Debt",
        barmode="relative",
        hovermode="x unified",
        xaxis_title="Date",
        yaxis_title="Value",
    )

    return fig, tidy


# =============================================================================
# Entity-level charts
# =============================================================================


def entity_value_over_time(frame: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Step chart of an entity's value after every committed snapshot.

    Values only change on simulated days, so the line is drawn with
    ``line_shape="hv"``. Concatenate several histories with an ``entity_name``
    column to overlay them.

    Args:
        frame: DataFrame from `Simulation.history()`

    Returns:
        Tuple of (plotly_figure, tidy_dataframe_used)
    """
    _check_plotly()

    tidy = _tidy(frame)
    fig = px.line(
        tidy,
        x="date",
        y="value",
        color="entity_name" if "entity_name" in tidy.columns else None,
        line_shape="hv",
        title="Entity Value Over Time",
        labels={"value": "Value", "date": "Date"},
    )

    fig.update_layout(hovermode="x unified", legend_title="Entity")

    return fig, tidy


def save_chart(fig: go.Figure, filename: str, format: str = "html") -> None:
    """
    Save chart to file.

    Args:
        fig: Plotly figure
        filename: Output filename
        format: Output format ('html', 'png', 'pdf', 'svg')
    """
    _check_plotly()

    if format == "html":
        fig.write_html(filename)
    elif format in ("png", "pdf", "svg"):
        fig.write_image(filename, format=format)
    else:
        raise ValueError(f"Unsupported format: {format}")
