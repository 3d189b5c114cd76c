"""Стили и константы для графика N^1.85."""

# Шрифты
FONT_FAMILY = "Georgia, 'Times New Roman', serif"
LABEL_FONT_FAMILY = "Inter, -apple-system, system-ui, Arial, sans-serif"
FONT_SIZE = 12
AXIS_TITLE_SIZE = 14
TITLE_SIZE = 16
DATE_SIZE = 11

# Поля области построения, px (место для подписей засечек, названий осей, заголовка)
MARGIN = {"top": 60, "right": 30, "bottom": 60, "left": 60}

# Кривые рисуются до этой доли от макс. давления, выше обрезаются
PRESSURE_OVERSCAN = 1.2

# Длины засечек, px
TICK_LENGTH = {"major": 6, "medium": 4, "short": 2}

# Толщины линий
LINE_WIDTH_CURVE = 2
LINE_WIDTH_GRID = 0.5
LINE_WIDTH_AXIS = 1
LINE_WIDTH_BORDER = 2

# Маркеры
TEST_POINT_RADIUS = 6
POINT_RADIUS = {"small": 8, "medium": 12, "large": 16}
LABEL_FONT_SIZE = {"small": 11, "medium": 13, "large": 16}
LINE_LABEL_SIZE = 11

# Стили линий кривых -> dash plotly
CURVE_DASH = {
    "solid": "solid",
    "dashed": "dash",
    "dotted": "dot",
    "dashdot": "dashdot",
}
ANNOTATION_DASH = {"solid": "solid", "dashed": "dash"}

# Светлая тема (печать / экспорт)
COLORS_LIGHT = {
    "template": "plotly_white",
    "paper_bg": "white",
    "plot_bg": "#ffffff",
    "text": "#000000",
    "grid": "#c0c0c0",
    "axis": "#000000",
    "border": "#000000",
    "marker_fill": "#ffffff",
    "point_outline": "#ffffff",
    "legend_bg": "rgba(255,255,255,0.9)",
}

# Тёмная тема (экран)
COLORS_DARK = {
    "template": "plotly_dark",
    "paper_bg": "#0e1117",
    "plot_bg": "#0e1117",
    "text": "#fafafa",
    "grid": "rgba(255,255,255,0.25)",
    "axis": "#fafafa",
    "border": "#fafafa",
    "marker_fill": "#0e1117",
    "point_outline": "#0e1117",
    "legend_bg": "rgba(38, 39, 48, 0.9)",
}

LABELS = {
    "flow_axis": "Flow (GPM)",
    "pressure_axis": "Head (PSI)",
    "hover": "Q = %{customdata[0]:,.0f} GPM<br>P = %{customdata[1]:.1f} PSI",
}
