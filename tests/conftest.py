import os

# Keep telelog off the console while tests run; must be set before
# line_sort.runtime.telemetry is first imported.
os.environ.setdefault("LINE_SORT_DISABLE_CONSOLE", "1")
