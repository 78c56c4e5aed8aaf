from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence
import pathlib, re, shutil, subprocess

from .core import (
    expand_inputs, resolve_output, count_numeric_columns, save_columns,
    parse_using_arg, build_style_cycler
)
from .specs import PlotSpecs

# output format -> (gnuplot terminal, size unit)
TERMINALS = {
    "pdf": ("pdfcairo", "in"),
    "png": ("pngcairo", "px"),
    "svg": ("svg", "px"),
    "eps": ("epscairo", "in"),
}

@dataclass
class Options:
    # I/O
    output: str = "plot"
    out_format: str = "pdf"                  # comma list, first one is the primary terminal
    dpi: int = 100                           # pixels per inch for px terminals
    glob: str = "*.txt"
    # Sizing / fonts
    width: float = 8.0
    height: float = 5.0
    font: Optional[str] = None
    fontsize: float = 11.0
    # Axes
    title: Optional[str] = None
    xlabel: Optional[str] = None
    ylabel: Optional[str] = None
    logx: bool = False
    logy: bool = False
    xrange: str = "auto"                     # "min:max" or "auto"
    yrange: str = "auto"
    grid: bool = False
    key: Optional[str] = None                # e.g. "top left", "off"
    # Series
    with_: str = "lines"
    using: Optional[str] = None              # e.g. "1:2" or "1:3:xtic(2)"
    palette: str = "auto6"
    colors: Optional[str] = None
    dashtypes: Optional[str] = None
    linewidth: Optional[float] = None        # None => PlotSpecs default
    pointtype: Optional[int] = None
    pointsize: Optional[float] = None
    labels: Optional[Iterable[str]] = None   # fileStem=Label ...
    order: Optional[str] = None              # comma list of basenames
    # Execution
    run: bool = False
    gnuplot: str = "gnuplot"

def plot_command(specs: Sequence[PlotSpecs]) -> str:
    if not specs:
        raise ValueError("Nothing to plot: no plot specs given.")
    return "plot " + ", ".join(s.repr() for s in specs)

def _quote(text: str) -> str:
    return "'" + str(text).replace("'", "''") + "'"

def _range_line(axis: str, value: Optional[str]) -> Optional[str]:
    if value is None: return None
    v = str(value).strip()
    if not v or v.lower() == "auto": return None
    if ":" not in v:
        raise ValueError(f"Range for {axis} must look like 'min:max', got '{value}'")
    return f"set {axis}range [{v}]"

def _terminal_line(ext: str, opts: Options) -> str:
    if ext not in TERMINALS:
        raise ValueError(f"Unsupported output format '{ext}' (choose from {', '.join(TERMINALS)})")
    term, unit = TERMINALS[ext]
    if unit == "in":
        size = f"size {opts.width:g}in,{opts.height:g}in"
    else:
        size = f"size {int(round(opts.width*opts.dpi))},{int(round(opts.height*opts.dpi))}"
    line = f"set terminal {term} {size}"
    if opts.font or opts.fontsize:
        font = f"{opts.font or ''},{opts.fontsize:g}"
        line += f" font {_quote(font)}"
    return line

def _slug(label: str) -> str:
    return re.sub(r"[^\w.-]+", "_", str(label)).strip("_") or "series"

class GnuplotScriptPipeline:
    """Notebook-friendly builder of gnuplot scripts; used by the CLI as well."""

    def _apply_styles(self, specs: List[PlotSpecs], opts: Options):
        cyc = build_style_cycler(len(specs), palette=opts.palette,
                                 colors_arg=opts.colors, dashtypes_arg=opts.dashtypes)
        for spec, style in zip(specs, cyc):
            spec.line_color(style["color"])
            if "dashtype" in style:
                dt = style["dashtype"]
                spec.dash_type(int(dt) if dt.isdigit() else _quote(dt))
            if opts.linewidth is not None:
                spec.line_width(opts.linewidth)
            if opts.pointtype is not None:
                spec.point_type(opts.pointtype)
            if opts.pointsize is not None:
                spec.point_size(opts.pointsize)
        return specs

    def specs_from_files(self, inputs: List[str], opts: Options) -> List[PlotSpecs]:
        files = expand_inputs(inputs, opts.glob)
        if not files:
            raise SystemExit("No input files found.")

        label_map = {}
        if opts.labels:
            for kv in opts.labels:
                if "=" in kv:
                    k, v = kv.split("=", 1)
                    label_map[k.strip()] = v.strip()

        if opts.order:
            desired = [s.strip() for s in opts.order.split(",") if s.strip()]
            files = sorted(files, key=lambda f: (desired.index(pathlib.Path(f).stem)
                       if pathlib.Path(f).stem in desired else 1e9, pathlib.Path(f).stem))

        use_kwargs = parse_using_arg(opts.using) if opts.using else {}
        needed = max(use_kwargs.values()) if use_kwargs else 0

        specs = []
        for f in files:
            path = pathlib.Path(f)
            if needed:
                width = count_numeric_columns(f)
                if width < needed:
                    print(f"[WARN] {f}: column {needed} selected but only {width} numeric columns found.")
            spec = PlotSpecs(_quote(path.as_posix()), opts.with_).title(label_map.get(path.stem, path.stem))
            if use_kwargs:
                spec.use(**use_kwargs)
            specs.append(spec)
        return self._apply_styles(specs, opts)

    def specs_from_arrays(self, series: Mapping[str, Sequence], opts: Options, datadir) -> List[PlotSpecs]:
        if not series:
            raise SystemExit("No series given.")
        datadir = pathlib.Path(datadir)
        datadir.mkdir(parents=True, exist_ok=True)
        use_kwargs = parse_using_arg(opts.using) if opts.using else {}
        specs = []
        for label, columns in series.items():
            path = save_columns(datadir / f"{_slug(label)}.dat", columns, header=str(label))
            spec = PlotSpecs(_quote(path.as_posix()), opts.with_).title(str(label))
            if use_kwargs:
                spec.use(**use_kwargs)
            specs.append(spec)
        return self._apply_styles(specs, opts)

    def build_script(self, specs: Sequence[PlotSpecs], opts: Options,
                     outdir: pathlib.Path, basename: str) -> str:
        exts = [e.strip().lower() for e in opts.out_format.split(",") if e.strip()]
        if not exts:
            raise ValueError("No output format given.")
        lines = [
            _terminal_line(exts[0], opts),
            f"set output {_quote((pathlib.Path(outdir) / f'{basename}.{exts[0]}').as_posix())}",
        ]
        if opts.title: lines.append(f"set title {_quote(opts.title)}")
        if opts.xlabel: lines.append(f"set xlabel {_quote(opts.xlabel)}")
        if opts.ylabel: lines.append(f"set ylabel {_quote(opts.ylabel)}")
        if opts.logx: lines.append("set logscale x")
        if opts.logy: lines.append("set logscale y")
        for axis, value in (("x", opts.xrange), ("y", opts.yrange)):
            rl = _range_line(axis, value)
            if rl: lines.append(rl)
        if opts.grid: lines.append("set grid")
        if opts.key:
            lines.append("unset key" if opts.key.strip() == "off" else f"set key {opts.key}")
        lines.append(plot_command(specs))
        # extra formats re-render the same plot on another terminal
        for ext in exts[1:]:
            lines.append(_terminal_line(ext, opts))
            lines.append(f"set output {_quote((pathlib.Path(outdir) / f'{basename}.{ext}').as_posix())}")
            lines.append("replot")
        lines.append("unset output")
        return "\n".join(lines) + "\n"

    def save(self, specs: Sequence[PlotSpecs], opts: Options) -> pathlib.Path:
        outdir, basename = resolve_output(opts.output)
        script = outdir / f"{basename}.gp"
        script.write_text(self.build_script(specs, opts, outdir, basename))
        print(f"Saved: {script.resolve()}")
        if opts.run:
            self.run_gnuplot(script, opts.gnuplot)
        return script

    def run_gnuplot(self, script: pathlib.Path, executable: str = "gnuplot"):
        exe = shutil.which(executable)
        if exe is None:
            raise RuntimeError(f"'{executable}' not found on PATH; script left at {script}")
        proc = subprocess.run([exe, str(script)], capture_output=True, text=True)
        if proc.returncode != 0:
            raise RuntimeError(f"gnuplot failed on {script} (exit {proc.returncode}): {proc.stderr.strip()}")
        if proc.stderr.strip():
            print(f"[WARN] gnuplot: {proc.stderr.strip()}")
        return proc

    def plot_and_save(self, inputs: List[str], opts: Options) -> pathlib.Path:
        return self.save(self.specs_from_files(inputs, opts), opts)

    def plot_arrays_and_save(self, series: Mapping[str, Sequence], opts: Options) -> pathlib.Path:
        outdir, _ = resolve_output(opts.output)
        return self.save(self.specs_from_arrays(series, opts, outdir), opts)
