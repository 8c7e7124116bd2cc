def test_fmt_symbol_quotes_whitespace_and_non_strings(m):
    assert m._fmt_symbol("a") == "a"
    assert m._fmt_symbol(" ") == "' '"
    assert m._fmt_symbol("\n") == "'\\n'"
    assert m._fmt_symbol(255) == "255"


def test_fmt_bits_and_ratio(m):
    assert m._fmt_bits(0) == "0 bits"
    assert m._fmt_bits(16) == "16 bits (2.00 B)"
    assert m._fmt_ratio(30, 15) == "2.00"
    assert m._fmt_ratio(30, 0) == "n/a"


def test_cli_parser_accepts_subcommands(m):
    parser = m.get_parser()
    ns = parser.parse_args(["demo"])
    assert ns.cmd in ("demo", "d") and ns.sample == m.DEFAULT_SAMPLE
    ns2 = parser.parse_args(["e", "abc", "-s", "abcd"])
    assert ns2.cmd in ("encode", "e") and ns2.text == "abc"
    assert ns2.sample == "abcd"
    ns3 = parser.parse_args(["decode", "0101", "--sample", "ab"])
    assert ns3.cmd in ("decode", "x") and ns3.bits == "0101"
    ns4 = parser.parse_args(["t"])
    assert ns4.cmd in ("table", "t")


def test_run_table_lines(m, capsys):
    lines = m.run_table("aab")
    assert lines == ["b\t1\t0", "a\t2\t1"]
    assert capsys.readouterr().out.splitlines() == lines
