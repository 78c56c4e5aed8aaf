from __future__ import annotations
import pathlib, re, os, glob
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import is_color_like, to_hex
from cycler import cycler

# ---------- Defaults ----------
DEFAULT_LINEWIDTH = 2
DEFAULT_POINTSIZE = 1
DEFAULT_FILL_INTENSITY = 1.0
USE_AUTO = None  # unset column in PlotSpecs.use()

SCRIPT_SUFFIXES = {".gp", ".plt", ".gnu"}

# ---------- Regex ----------
_num_pat = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_ws_pat = re.compile(r"\s+")
_tic_pat = re.compile(r"^(\w+)\((.*)\)$")

# ---------- gnuplot string helpers ----------
def remove_extra_whitespaces(text: str) -> str:
    return _ws_pat.sub(" ", text).strip()

def titlestr(word: str) -> str:
    # columnheader is a gnuplot keyword, not a label
    if word == "columnheader" or word.startswith("columnheader("):
        return word
    return "'" + word + "'"

def option_value_str(option: str, value) -> str:
    if value is None: return ""
    s = str(value)
    return f"{option} {s} " if s else ""

def color_str(color) -> str:
    """
    Format a color as a gnuplot rgb literal.
    Anything matplotlib understands is normalized to '#rrggbb'; gnuplot-only
    names (e.g. 'dark-red') go through untouched.
    """
    if is_color_like(color):
        color = to_hex(color, keep_alpha=False)
    return f"rgb '{color}'"

# ---------- Column selection ----------
USE_KEYS = ("xcol", "ycol", "zcol", "xtic", "x2tic", "ytic", "y2tic", "ztic")

def parse_using_arg(text: str) -> dict:
    """
    Turn '1:2:xtic(3)' into keyword arguments for PlotSpecs.use().
    Bare integers fill xcol, ycol, zcol in order.
    """
    kwargs = {}
    plain = list(USE_KEYS[:3])
    for item in [s.strip() for s in str(text).split(":")]:
        if not item:
            raise ValueError(f"Empty column entry in '{text}'")
        m = _tic_pat.match(item)
        if m:
            key, raw = m.group(1), m.group(2).strip()
            if key not in USE_KEYS[3:]:
                raise ValueError(f"Unknown column entry '{item}' in '{text}' (tic entries: {', '.join(USE_KEYS[3:])})")
        else:
            if not plain:
                raise ValueError(f"At most three plain columns are allowed in '{text}'")
            key, raw = plain.pop(0), item
        try:
            idx = int(raw)
        except ValueError:
            raise ValueError(f"Column index must be an integer, got '{raw}' in '{text}'") from None
        if key in kwargs:
            raise ValueError(f"Column entry '{key}' given twice in '{text}'")
        kwargs[key] = idx
    return kwargs

# ---------- Colors & dash types ----------
DEFAULT_COLORS6 = ["#0072B2", "#E69F00", "#009E73", "#56B4E9", "#D55E00", "#CC79A7"]

def _repeat_to_length(seq, n):
    if not seq: return []
    reps = (n + len(seq) - 1) // len(seq)
    return list((seq * reps)[:n])

def _split_csv(arg):
    if arg is None: return []
    return [s.strip() for s in str(arg).split(",") if s.strip()]

def _palette_colors(palette, n):
    if n <= 0: return []
    p = (palette or "").lower()
    if p in ("auto6","default6"):
        cols = DEFAULT_COLORS6
    elif p == "mono":
        cols = ["#000000"]
    elif p in ("tab10","tableau"):
        cmap = plt.get_cmap("tab10");  cols = [cmap(i % cmap.N) for i in range(n)]
    elif p == "set2":
        cmap = plt.get_cmap("Set2");   cols = [cmap(i % cmap.N) for i in range(n)]
    elif p == "dark2":
        cmap = plt.get_cmap("Dark2");  cols = [cmap(i % cmap.N) for i in range(n)]
    elif p == "viridis":
        cmap = plt.get_cmap("viridis");cols = [cmap(i / max(1, n-1)) for i in range(n)]
    elif p == "colorblind":
        cols = ["#0072B2","#E69F00","#009E73","#56B4E9","#D55E00","#CC79A7","#F0E442","#999999"]
    else:
        cols = DEFAULT_COLORS6
    return [to_hex(c, keep_alpha=False) for c in _repeat_to_length(cols, n)]

def build_style_cycler(n, palette=None, colors_arg=None, dashtypes_arg=None):
    user_colors = _split_csv(colors_arg)
    if user_colors:
        colors = _repeat_to_length(user_colors, n)
    else:
        colors = _palette_colors(palette, n)
    cyc = cycler(color=colors)
    dashes = _split_csv(dashtypes_arg)
    if dashes and n > 0:
        cyc = cyc + cycler(dashtype=_repeat_to_length(dashes, n))
    return cyc

# ---------- I/O helpers ----------
def expand_inputs(inputs, dir_glob: str):
    files = []
    for item in inputs:
        if os.path.isdir(item):
            files.extend(sorted(glob.glob(os.path.join(item, dir_glob))))
        else:
            files.extend(sorted(glob.glob(item)))
    seen, unique = set(), []
    for f in files:
        if f not in seen:
            seen.add(f); unique.append(f)
    return unique

def resolve_output(output_arg: str, default_basename: str = "plot"):
    """
    Interpret --output as either a directory or a basename path.
    Trailing '/' or '\\' is a directory hint; .gp/.plt/.gnu suffixes are dropped.
    """
    p = pathlib.Path(output_arg)
    dir_trailer = str(output_arg).endswith(("/", "\\"))
    is_dir_hint = dir_trailer or (p.exists() and p.is_dir())
    if is_dir_hint:
        outdir = p
        basename = default_basename
    else:
        basename = p.stem if p.suffix.lower() in SCRIPT_SUFFIXES else p.name
        outdir = p.parent if str(p.parent) != "" else pathlib.Path.cwd()
    try:
        outdir.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        print(f"Warning: no permission to write to '{outdir}'. Falling back to CWD.")
        outdir = pathlib.Path.cwd()
    return outdir, basename

def count_numeric_columns(path: str) -> int:
    widest = 0
    with open(path, "r", errors="ignore") as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith("#"): continue
            s = s.replace(",", " ").replace(";", " ")
            widest = max(widest, len(_num_pat.findall(s)))
    return widest

def save_columns(path, columns, header=None):
    if not columns:
        raise ValueError("No columns to write")
    cols = [np.asarray(c, float).ravel() for c in columns]
    lengths = {c.size for c in cols}
    if len(lengths) != 1:
        raise ValueError(f"Columns differ in length: {sorted(lengths)}")
    data = np.column_stack(cols)
    np.savetxt(str(path), data, fmt="%.10g", header=header or "", comments="# ")
    return pathlib.Path(path)
