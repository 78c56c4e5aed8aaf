import pytest
from gpspecs.core import USE_AUTO, DEFAULT_LINEWIDTH
from gpspecs.specs import PlotSpecs, LineSpecs, PointSpecs, FillSpecs

def test_defaults_render_subject_style_and_linewidth():
    s = PlotSpecs("sin(x)", "lines")
    assert s.repr() == f"sin(x) with lines linewidth {DEFAULT_LINEWIDTH}"
    assert s.using is None and s.title_text is None

def test_title_is_quoted_and_leaves_other_fragments_alone():
    s = PlotSpecs("sin(x)", "lines")
    before = s.repr()
    s.title("sin(x)")
    assert s.repr() == "sin(x) title 'sin(x)' with lines linewidth 2"
    assert s.repr().replace(" title 'sin(x)'", "") == before

def test_title_last_write_wins():
    s = PlotSpecs("x", "points").title("a").title("b")
    assert "title 'b'" in s.repr() and "'a'" not in s.repr()

def test_columnheader_title_is_not_quoted():
    assert "title columnheader with" in PlotSpecs("'d.txt'", "lines").title("columnheader").repr()

@pytest.mark.parametrize("kwargs, expected", [
    (dict(xcol=2), "2"),
    (dict(xcol=1, ycol=2), "1:2"),
    (dict(xtic=3), "xtic(3)"),
    (dict(ycol=2), "2"),
    (dict(xcol=1, ycol=2, zcol=3), "1:2:3"),
    (dict(xcol=1, ytic=4, ztic=5), "1:ytic(4):ztic(5)"),
    (dict(ycol=3, x2tic=1, y2tic=2), "3:x2tic(1):y2tic(2)"),
    (dict(xcol=0), "0"),
])
def test_use_joins_selected_columns_in_fixed_order(kwargs, expected):
    s = PlotSpecs("'data.txt'", "lines").use(**kwargs)
    assert s.using == expected
    assert f"'data.txt' using {expected} with lines" in s.repr()

def test_use_positional_with_auto_placeholders():
    s = PlotSpecs("'d'", "lines").use(USE_AUTO, USE_AUTO, USE_AUTO, 3, USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO)
    assert s.using == "xtic(3)"

def test_use_all_unset_emits_no_using_clause():
    s = PlotSpecs("'d'", "lines").use(1, 2)
    s.use(USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO, USE_AUTO)
    assert s.using is None
    assert "using" not in s.repr()
    assert s.repr() == "'d' with lines linewidth 2"

def test_use_replaces_previous_selection():
    s = PlotSpecs("'d'", "lines").use(1, 2).use(3)
    assert s.using == "3"

def test_full_chain_renders_in_fixed_order():
    s = (PlotSpecs("'data.txt'", "linespoints")
         .use(1, 2).title("run A").line_width(3).line_color("#0072B2").point_type(7))
    assert s.repr() == ("'data.txt' using 1:2 title 'run A' with linespoints "
                        "linewidth 3 linecolor rgb '#0072b2' pointtype 7")

def test_fill_fragment_comes_last():
    s = PlotSpecs("'d'", "filledcurves").fill_intensity(0.4).border_hide().point_size(2)
    assert s.repr() == "'d' with filledcurves linewidth 2 pointsize 2 fillstyle solid 0.4 noborder"

def test_repr_is_repeatable_and_str_matches():
    s = PlotSpecs("'d'", "lines").use(1, 2).title("t").dash_type(2)
    assert s.repr() == s.repr() == str(s)

def test_no_double_or_edge_spaces():
    r = PlotSpecs("  sin(x) ", "lines").repr()
    assert "  " not in r and r == r.strip()

def test_empty_subject_and_style_are_accepted():
    assert PlotSpecs("", "").repr() == "linewidth 2"

def test_hidden_line_drops_line_options():
    s = PlotSpecs("'d'", "points").line_color("red").line_hidden()
    assert s.repr() == "'d' with points"

def test_line_specs_format():
    ls = LineSpecs(linestyle=1, linetype=2, linewidth=1.5, linecolor="red", dashtype=3)
    assert ls.format() == "linestyle 1 linetype 2 linewidth 1.5 linecolor rgb '#ff0000' dashtype 3"
    assert LineSpecs().format() == ""

def test_gnuplot_only_color_names_pass_through():
    assert LineSpecs(linecolor="dark-red").format() == "linecolor rgb 'dark-red'"

def test_point_specs_format():
    assert PointSpecs(pointtype=7, pointsize=1.5).format() == "pointtype 7 pointsize 1.5"
    assert PointSpecs().format() == ""

@pytest.mark.parametrize("fill, expected", [
    (FillSpecs(), ""),
    (FillSpecs(intensity=0.3), "fillstyle solid 0.3"),
    (FillSpecs(style="solid", transparent=True, intensity=0.5, border=False),
     "fillstyle transparent solid 0.5 noborder"),
    (FillSpecs(pattern=2, bordercolor="black"), "fillstyle pattern 2 border linecolor rgb '#000000'"),
    (FillSpecs(style="empty", border=True), "fillstyle empty border"),
])
def test_fill_specs_format(fill, expected):
    assert fill.format() == expected

def test_point_size_defaults_to_one():
    assert PlotSpecs("'d'", "points").point_size().repr() == "'d' with points linewidth 2 pointsize 1"
