from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .core import (
    DEFAULT_LINEWIDTH, DEFAULT_POINTSIZE, DEFAULT_FILL_INTENSITY, USE_AUTO,
    remove_extra_whitespaces, titlestr, option_value_str, color_str
)

Number = Union[int, float]

# ---------- Style option structs ----------
@dataclass
class LineSpecs:
    linestyle: Optional[int] = None
    linetype: Optional[int] = None
    linewidth: Optional[Number] = None
    linecolor: Optional[str] = None          # any color; formatted as rgb '#rrggbb'
    dashtype: Optional[Union[int, str]] = None
    hidden: bool = False

    def format(self) -> str:
        if self.hidden: return ""
        s = option_value_str("linestyle", self.linestyle)
        s += option_value_str("linetype", self.linetype)
        s += option_value_str("linewidth", self.linewidth)
        s += option_value_str("linecolor", color_str(self.linecolor) if self.linecolor is not None else None)
        s += option_value_str("dashtype", self.dashtype)
        return remove_extra_whitespaces(s)

@dataclass
class PointSpecs:
    pointtype: Optional[int] = None
    pointsize: Optional[Number] = None

    def format(self) -> str:
        s = option_value_str("pointtype", self.pointtype)
        s += option_value_str("pointsize", self.pointsize)
        return remove_extra_whitespaces(s)

@dataclass
class FillSpecs:
    style: Optional[str] = None              # ["solid","pattern","empty"]
    intensity: Optional[Number] = None       # solid density, 0..1
    pattern: Optional[int] = None
    transparent: bool = False
    border: Optional[bool] = None            # None => gnuplot default
    bordercolor: Optional[str] = None

    def _is_set(self) -> bool:
        return any(v is not None for v in (self.style, self.intensity, self.pattern, self.border, self.bordercolor)) \
            or self.transparent

    def format(self) -> str:
        if not self._is_set(): return ""
        style = self.style
        if style is None:
            if self.pattern is not None: style = "pattern"
            elif self.intensity is not None or self.transparent: style = "solid"
        parts = ["fillstyle"]
        if self.transparent: parts.append("transparent")
        if style == "solid":
            parts.append("solid")
            if self.intensity is not None: parts.append(str(self.intensity))
        elif style == "pattern":
            parts.append("pattern")
            if self.pattern is not None: parts.append(str(self.pattern))
        elif style == "empty":
            parts.append("empty")
        if self.border is False:
            parts.append("noborder")
        elif self.border or self.bordercolor is not None:
            parts.append("border")
            if self.bordercolor is not None:
                parts.append("linecolor " + color_str(self.bordercolor))
        return remove_extra_whitespaces(" ".join(parts))

# ---------- Plot specification ----------
class PlotSpecs:
    """
    Options for one series of a gnuplot `plot` command.

    `what` is the plotted subject ("'data.txt'", "sin(x)", ...) and `with_` the
    draw style ("lines", "points", ...). Every mutator returns the instance so
    calls can be chained; `repr()` renders the fragment, e.g.

        'data.txt' using 1:2 title 'run A' with lines linewidth 2
    """

    def __init__(self, what: str, with_: str):
        self._what = what
        self._with = with_
        self._title: Optional[str] = None
        self._using: Optional[str] = None
        self.line = LineSpecs(linewidth=DEFAULT_LINEWIDTH)
        self.point = PointSpecs()
        self.fill = FillSpecs()

    @property
    def what(self) -> str: return self._what

    @property
    def with_(self) -> str: return self._with

    @property
    def using(self) -> Optional[str]: return self._using

    @property
    def title_text(self) -> Optional[str]: return self._title

    def title(self, value: str) -> "PlotSpecs":
        self._title = titlestr(value)
        return self

    def use(self, xcol=USE_AUTO, ycol=USE_AUTO, zcol=USE_AUTO, xtic=USE_AUTO,
            x2tic=USE_AUTO, ytic=USE_AUTO, y2tic=USE_AUTO, ztic=USE_AUTO) -> "PlotSpecs":
        """
        Select data columns and tick-label columns, like gnuplot's `using`.
        Leave an entry at USE_AUTO to skip it: use(USE_AUTO, 2) gives 'using 2'.
        With every entry unset no `using` clause is emitted.
        """
        values = [
            (xcol, str(xcol)),
            (ycol, str(ycol)),
            (zcol, str(zcol)),
            (xtic, f"xtic({xtic})"),
            (x2tic, f"x2tic({x2tic})"),
            (ytic, f"ytic({ytic})"),
            (y2tic, f"y2tic({y2tic})"),
            (ztic, f"ztic({ztic})"),
        ]
        strings = [s for idx, s in values if idx is not USE_AUTO]
        self._using = ":".join(strings) if strings else None
        return self

    # line
    def line_width(self, value: Number) -> "PlotSpecs":
        self.line.linewidth = value; return self

    def line_color(self, value: str) -> "PlotSpecs":
        self.line.linecolor = value; return self

    def line_type(self, value: int) -> "PlotSpecs":
        self.line.linetype = value; return self

    def line_style(self, value: int) -> "PlotSpecs":
        self.line.linestyle = value; return self

    def dash_type(self, value) -> "PlotSpecs":
        self.line.dashtype = value; return self

    def line_hidden(self, value: bool = True) -> "PlotSpecs":
        self.line.hidden = value; return self

    # point
    def point_type(self, value: int) -> "PlotSpecs":
        self.point.pointtype = value; return self

    def point_size(self, value: Number = DEFAULT_POINTSIZE) -> "PlotSpecs":
        self.point.pointsize = value; return self

    # fill
    def fill_solid(self) -> "PlotSpecs":
        self.fill.style = "solid"; return self

    def fill_intensity(self, value: Number = DEFAULT_FILL_INTENSITY) -> "PlotSpecs":
        self.fill.style = "solid"; self.fill.intensity = value; return self

    def fill_transparent(self, value: bool = True) -> "PlotSpecs":
        self.fill.transparent = value; return self

    def fill_pattern(self, value: int) -> "PlotSpecs":
        self.fill.style = "pattern"; self.fill.pattern = value; return self

    def fill_empty(self) -> "PlotSpecs":
        self.fill.style = "empty"; return self

    def border_show(self) -> "PlotSpecs":
        self.fill.border = True; return self

    def border_hide(self) -> "PlotSpecs":
        self.fill.border = False; return self

    def border_color(self, value: str) -> "PlotSpecs":
        self.fill.border = True; self.fill.bordercolor = value; return self

    def repr(self) -> str:
        s = f"{self._what} "
        s += option_value_str("using", self._using)
        s += option_value_str("title", self._title)
        s += option_value_str("with", self._with)
        s += self.line.format() + " "
        s += self.point.format() + " "
        s += self.fill.format() + " "
        return remove_extra_whitespaces(s)

    def __str__(self) -> str:
        return self.repr()

    def __repr__(self) -> str:
        return f"PlotSpecs({self.repr()!r})"
