"""Chart.js payload helpers.

The chart itself is drawn client-side by Chart.js. This package turns analysis
chart series into the `{labels, datasets}` payload and holds the static chart
options used by the dashboard view.
"""
