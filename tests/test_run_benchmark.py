from rsabench.batch.run_benchmark import DEMO_MESSAGES, demo_rows, main


def test_demo_command(capsys):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "Public key (e, n): 47, 551" in out
    assert "Private key (d, n): 311, 551" in out
    assert "NO" not in out.split("=" * 58)[1]
    assert "Demo finished successfully!" in out


def test_demo_rows_keep_input_order(demo_key_pair):
    rows = demo_rows(DEMO_MESSAGES, demo_key_pair)
    assert [r[0] for r in rows] == DEMO_MESSAGES
    assert all(r[3] for r in rows)


def test_bench_synthetic(capsys):
    code = main(["bench", "--bits", "64", "--count", "12", "--workers", "1", "3", "--seed", "7"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.count("Speed-up:") == 2
    assert "Workers: 3" in out
    assert "12/12 correct" in out
    assert "Private key" not in out


def test_bench_message_files(tmp_path, capsys):
    good = tmp_path / "set1.txt"
    good.write_text("5\n19 13 30 350 500\n")
    empty = tmp_path / "set2.txt"
    empty.write_text("0\n")
    missing = tmp_path / "set3.txt"

    code = main(["bench", "--bits", "32", "--seed", "1", "--workers", "2",
                 "--messages", str(good), str(empty), str(missing)])

    assert code == 0
    captured = capsys.readouterr()
    assert "5/5 correct" in captured.out
    assert "nothing to process" in captured.out
    assert "set3.txt" in captured.err


def test_bench_print_pem(capsys):
    assert main(["bench", "--bits", "64", "--count", "2", "--seed", "3", "--print-pem"]) == 0
    assert "-----BEGIN PUBLIC KEY-----" in capsys.readouterr().out


def test_bench_bad_arguments(capsys):
    assert main(["bench", "--bits", "4", "--count", "2"]) == 1
    assert main(["bench", "--bits", "64", "--workers", "0"]) == 1
    assert main(["bench", "--bits", "64", "--rounds", "0"]) == 1
    assert "[!] error" in capsys.readouterr().err
