def test_demo_prints_roundtrip(m, capsys):
    assert m.main(["demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "encoded: 000001010011110100111101111110"
    assert out[1] == "decoded: hey pratap"
    assert any(line.startswith("Compression ratio: 1.00") for line in out)


def test_encode_then_decode(m, capsys):
    assert m.main(["encode", "abracadabra"]) == 0
    bits = capsys.readouterr().out.strip()
    assert set(bits) <= {"0", "1"}

    assert m.main(["x", bits, "-s", "abracadabra"]) == 0
    assert capsys.readouterr().out.strip() == "abracadabra"


def test_errors_are_reported(m, capsys):
    assert m.main(["encode", "abc", "-s", "ab"]) == 1
    assert capsys.readouterr().out.startswith("[!] Unknown symbol 'c'")

    assert m.main(["decode", "1", "-s", "abcc"]) == 1
    assert capsys.readouterr().out.startswith("[!] Bit sequence ends")

    assert m.main(["table", "-s", ""]) == 1
    assert capsys.readouterr().out.startswith("[!] Cannot build")
