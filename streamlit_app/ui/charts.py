"""
Chart builders for the results screen.

All charts share the same quiet theme with the app's pastel palette.
"""

from typing import Dict

import altair as alt
import pandas as pd

COLORS = {
    "dry": "#fbbf24",
    "oily": "#60a5fa",
    "combination": "#a78bfa",
    "normal": "#34d399",
    "sensitive": "#f472b6",
    "text": "#374151",
    "grid": "#f3f4f6",
}


def apply_theme(chart: alt.Chart) -> alt.Chart:
    """
    Apply the shared theme to an Altair chart.

    Args:
        chart: Altair chart to theme

    Returns:
        Themed chart with consistent styling
    """
    return chart.configure_view(
        strokeWidth=0,
    ).configure_axis(
        grid=True,
        gridColor=COLORS["grid"],
        domain=False,
        ticks=False,
        labelColor=COLORS["text"],
        labelFontSize=12,
        titleColor=COLORS["text"],
        titleFontSize=12,
        titleFontWeight="normal",
    ).configure(
        background="transparent",
    )


def build_tally_chart(tally: Dict[str, int]) -> alt.Chart:
    """
    Build a horizontal bar chart of quiz answers per skin type.

    Args:
        tally: Answer count per skin type, as returned by tally_answers()

    Returns:
        Themed bar chart, bars in tally order
    """
    df = pd.DataFrame(
        {"Skin type": list(tally.keys()), "Answers": list(tally.values())}
    )
    skin_types = list(tally.keys())

    chart = alt.Chart(df).mark_bar(cornerRadiusEnd=6).encode(
        x=alt.X("Answers:Q", axis=alt.Axis(tickMinStep=1, format="d")),
        y=alt.Y("Skin type:N", sort=skin_types, title=None),
        color=alt.Color(
            "Skin type:N",
            scale=alt.Scale(domain=skin_types, range=[COLORS.get(s, COLORS["normal"]) for s in skin_types]),
            legend=None,
        ),
        tooltip=["Skin type", "Answers"],
    ).properties(height=40 * max(len(skin_types), 1))

    return apply_theme(chart)
