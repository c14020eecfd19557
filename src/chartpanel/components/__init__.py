"""Qt widgets hosting the chart core."""
