from rsabench.batch.report import format_demo_table, format_key_material, format_report
from rsabench.batch.results import BatchResult, build_report, speedup_ratio


def test_speedup_ratio():
    assert speedup_ratio(100.0, 25.0) == 4.0
    assert speedup_ratio(100.0, 0.0) == 0.0
    assert speedup_ratio(0.0, 0.0) == 0.0


def test_build_report_verdict():
    seq = BatchResult(correct_count=10, elapsed_millis=80.0, total=10)
    par = BatchResult(correct_count=10, elapsed_millis=20.0, total=10)
    report = build_report(4, seq, par, 10)
    assert report.all_correct
    assert report.speedup == 4.0

    bad = BatchResult(correct_count=9, elapsed_millis=20.0, total=10)
    assert not build_report(4, seq, bad, 10).all_correct


def test_build_report_zero_parallel_time():
    seq = BatchResult(correct_count=0, elapsed_millis=1.0, total=0)
    par = BatchResult(correct_count=0, elapsed_millis=0.0, total=0)
    report = build_report(2, seq, par, 0)
    assert report.speedup == 0.0
    assert report.all_correct


def test_report_to_dict():
    seq = BatchResult(correct_count=3, elapsed_millis=3.0, total=3)
    par = BatchResult(correct_count=3, elapsed_millis=1.5, total=3)
    data = build_report(2, seq, par, 3).to_dict()
    assert data["workers"] == 2
    assert data["sequential"] == {"correct_count": 3, "elapsed_millis": 3.0, "total": 3}
    assert data["speedup"] == 2.0


def test_format_report():
    seq = BatchResult(correct_count=3, elapsed_millis=3.0, total=3)
    par = BatchResult(correct_count=2, elapsed_millis=1.5, total=3)
    text = format_report(build_report(2, seq, par, 3))
    assert "Workers: 2" in text
    assert "Parallel: 2/3 correct" in text
    assert "Speed-up: 2.00x" in text
    assert "FAILURES" in text


def test_format_key_material_hides_private_by_default(demo_key_pair):
    text = format_key_material(demo_key_pair)
    assert "47, 551" in text
    assert "311" not in text
    assert "bit-length = 10" in text
    assert "311, 551" in format_key_material(demo_key_pair, include_private=True)


def test_format_demo_table():
    text = format_demo_table([(19, 76, 19, True), (13, 5, 7, False)])
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[2].split() == ["19", "76", "19", "YES"]
    assert lines[3].endswith("NO")
