"""Plotly figure builders for price charts."""

from __future__ import annotations

import plotly.graph_objects as go
import pandas as pd

LINE_COLOR = "rgba(255, 99, 132, 1)"


def make_sparkline(frame: pd.DataFrame, title: str, height: int = 120) -> go.Figure:
    """Build a compact line chart from a (timestamp, price) frame."""
    fig = go.Figure()

    if frame.empty:
        fig.add_annotation(text="Waiting for data", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
    else:
        fig.add_trace(
            go.Scatter(
                x=frame["timestamp"],
                y=frame["price"],
                mode="lines+markers",
                name=title,
                line=dict(color=LINE_COLOR, shape="spline", smoothing=0.1),
                marker=dict(size=4),
                hovertemplate="%{x}<br>$%{y:.2f}<extra></extra>",
            )
        )

    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        template="plotly_dark",
    )
    fig.update_xaxes(type="category", showgrid=False)
    fig.update_yaxes(autorange=True, rangemode="normal", tickprefix="$")

    return fig
