# plotting helpers

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns


def plot_bar_chart(spec: dict, save_path: str | None = None):
    """
    Bar chart from a ChartSpec (see charts.py).

    Horizontal specs put the largest bar on top; each bar is labelled with its value.
    Returns the matplotlib Figure (closed after saving when save_path is given).
    """
    style = spec["style"]
    horizontal = style.get("orientation", "h") == "h"
    df = pd.DataFrame({"category": spec["categories"], "value": spec["values"]})

    fig, ax = plt.subplots(figsize=(10, 6))
    fig.patch.set_facecolor(style["background"])
    ax.set_facecolor(style["background"])

    if horizontal:
        sns.barplot(data=df, x="value", y="category", color=style["bar_color"], ax=ax)
        for i, v in enumerate(df["value"]):
            ax.text(v + 0.3, i, str(v), color=style["bar_color"], va="center")
        ax.grid(axis="x", color=style["text_color"], linewidth=0.5)
    else:
        sns.barplot(data=df, x="category", y="value", color=style["bar_color"], ax=ax)
        for i, v in enumerate(df["value"]):
            ax.text(i, v, str(v), color=style["bar_color"], ha="center", va="bottom")
        ax.tick_params(axis="x", rotation=45)
        ax.grid(axis="y", color=style["text_color"], linewidth=0.5)

    ax.set_axisbelow(True)
    ax.set_title(spec["title"], color=style["text_color"], fontsize=15)
    ax.set_xlabel(spec["x_label"], color=style["text_color"])
    ax.set_ylabel(spec["y_label"], color=style["text_color"])
    ax.tick_params(colors=style["text_color"], labelsize=10)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, facecolor=fig.get_facecolor())
        plt.close(fig)
    return fig


def build_marker_map(markers: list[dict], title: str = "") -> go.Figure:
    """World map with one point per marker; hovering shows the marker's popup HTML."""
    fig = go.Figure(
        go.Scattergeo(
            lat=[m["lat"] for m in markers],
            lon=[m["lon"] for m in markers],
            hovertext=[m["popup_html"] for m in markers],
            hoverinfo="text",
            mode="markers",
            marker={"size": 9, "color": "#256e35", "line": {"width": 1, "color": "#242424"}},
        )
    )
    fig.update_geos(projection_type="natural earth", showcountries=True, center={"lat": 0, "lon": 0})
    fig.update_layout(title=title, margin={"l": 0, "r": 0, "t": 40, "b": 0})
    return fig


def save_marker_map(markers: list[dict], path: str, title: str = "") -> None:
    """Write the marker map as a standalone HTML file."""
    build_marker_map(markers, title).write_html(path, include_plotlyjs="cdn")
