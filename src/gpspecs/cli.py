from __future__ import annotations
import argparse
from .core import parse_using_arg
from .pipeline import GnuplotScriptPipeline, Options, TERMINALS

def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Write a gnuplot script overlaying data files")
    ap.add_argument("inputs", nargs="+", help="Files, GLOB patterns, or directories.")
    ap.add_argument("-o","--output", default="plot",
                    help="Basename or directory. If a directory (or ends with '/' or '\\'), files are saved inside.")
    ap.add_argument("--out-format", default="pdf",
                    help=f"Comma-separated formats rendered by the script ({', '.join(TERMINALS)}; default 'pdf').")
    ap.add_argument("--dpi", type=int, default=100, help="Pixels per inch for png/svg (default 100).")
    ap.add_argument("--glob", default="*.txt", help="If a directory is provided, include files matching this pattern.")
    ap.add_argument("--run", action="store_true", help="Run gnuplot on the written script.")
    ap.add_argument("--gnuplot", default="gnuplot", help="gnuplot executable (default 'gnuplot').")
    # Sizing / fonts
    ap.add_argument("--width", type=float, default=8.0, help="Figure width in inches (default 8).")
    ap.add_argument("--height", type=float, default=5.0, help="Figure height in inches (default 5).")
    ap.add_argument("--font", default=None, help="Font family (e.g., 'Arial').")
    ap.add_argument("--fontsize", type=float, default=11.0, help="Base font size (default 11).")
    # Axes
    ap.add_argument("--title", default=None, help="Plot title.")
    ap.add_argument("--xlabel", default=None)
    ap.add_argument("--ylabel", default=None)
    ap.add_argument("--logx", action="store_true", help="Log scale on x.")
    ap.add_argument("--logy", action="store_true", help="Log scale on y.")
    ap.add_argument("--xrange", default="auto", help="'min:max' or 'auto'.")
    ap.add_argument("--yrange", default="auto", help="'min:max' or 'auto'.")
    ap.add_argument("--grid", action="store_true", help="Show grid.")
    ap.add_argument("--key", default=None, help="Key placement, e.g. 'top left', or 'off'.")
    # Series
    ap.add_argument("--with", dest="with_", default="lines", help="Draw style (lines, points, linespoints, ...).")
    ap.add_argument("--using", default=None, help="Column selection, e.g. '1:2' or '1:3:xtic(2)'.")
    ap.add_argument("--palette", default="auto6", type=str.lower,
                    choices=["auto6","tab10","tableau","set2","dark2","viridis","colorblind","mono"],
                    help="Color palette (default 'auto6' = Okabe-Ito; use 'mono' for all black).")
    ap.add_argument("--colors", default=None, help="Comma-separated colors; overrides palette.")
    ap.add_argument("--dashtypes", default=None, help="Comma-separated gnuplot dash types, e.g. '1,2,3'.")
    ap.add_argument("--linewidth", type=float, default=None, help="Line width (default 2).")
    ap.add_argument("--pointtype", type=int, default=None)
    ap.add_argument("--pointsize", type=float, default=None)
    ap.add_argument("--labels", nargs="*", default=None, help='Label remap: fileStem=Label ...')
    ap.add_argument("--order", default=None, help='Comma-separated order of basenames.')
    return ap

def main(argv=None):
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.using:
        try:
            parse_using_arg(args.using)
        except ValueError as e:
            ap.error(f"--using: {e}")

    opts = Options(
        output=args.output, out_format=args.out_format, dpi=args.dpi, glob=args.glob,
        width=args.width, height=args.height, font=args.font, fontsize=args.fontsize,
        title=args.title, xlabel=args.xlabel, ylabel=args.ylabel, logx=args.logx, logy=args.logy,
        xrange=args.xrange, yrange=args.yrange, grid=args.grid, key=args.key,
        with_=args.with_, using=args.using, palette=args.palette, colors=args.colors,
        dashtypes=args.dashtypes, linewidth=args.linewidth, pointtype=args.pointtype,
        pointsize=args.pointsize, labels=args.labels, order=args.order,
        run=args.run, gnuplot=args.gnuplot
    )

    pipe = GnuplotScriptPipeline()
    pipe.plot_and_save(args.inputs, opts)

if __name__ == "__main__":
    main()
