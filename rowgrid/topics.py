"""
Event Topics for rowgrid

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Render lifecycle events
RENDER_STARTED = "render.started"
"""Published before a collection is painted. Params: row_count, item_count"""

CELL_RENDERED = "render.cell"
"""Published for each item cell, in row-major order, once painting is done.
Params: key, geometry"""

RENDER_FINISHED = "render.finished"
"""Published when painting a collection ends, also when a view failed to draw.
Params: row_count, item_count"""
