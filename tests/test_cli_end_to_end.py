import pytest
from gpspecs.cli import main

def test_cli_writes_script(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("1000 0.0\n2000 1.0\n")
    outdir = tmp_path / "plots"
    argv = [str(a), "-o", str(outdir) + "/", "--using", "1:2", "--with", "linespoints",
            "--out-format", "png", "--logx", "--labels", "a=Sample A"]
    main(argv)
    script = outdir / "plot.gp"
    assert script.exists()
    text = script.read_text()
    assert f"set output '{(outdir / 'plot.png').as_posix()}'" in text
    assert "set logscale x" in text
    assert f"plot '{a.as_posix()}' using 1:2 title 'Sample A' with linespoints linewidth 2" in text

def test_cli_rejects_bad_using(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("1 2\n")
    with pytest.raises(SystemExit):
        main([str(a), "-o", str(tmp_path) + "/", "--using", "1:x"])

@pytest.mark.parametrize("palette", ["set2", "Set2", "DARK2"])
def test_cli_palette_is_case_insensitive(tmp_path, palette):
    a = tmp_path / "a.txt"
    a.write_text("1 2\n")
    main([str(a), "-o", str(tmp_path) + "/", "--palette", palette])
    assert "linecolor rgb '#" in (tmp_path / "plot.gp").read_text()
