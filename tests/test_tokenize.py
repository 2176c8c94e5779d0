from adante.parsing.tokenize import is_flag, split_flag


def test_is_flag():
    assert is_flag("-v")
    assert is_flag("--verbose=1")
    assert is_flag("-")
    assert not is_flag("add")
    assert not is_flag("a-b")
    assert not is_flag("")


def test_split_without_separator_keeps_whole_token():
    assert split_flag("--verbose") == ("--verbose", None)


def test_split_at_first_separator():
    assert split_flag("-h=test") == ("-h", "test")
    assert split_flag("-e=A=B=C") == ("-e", "A=B=C")


def test_split_empty_value():
    assert split_flag("--out=") == ("--out", "")


def test_split_value_keeps_whitespace_and_dashes():
    assert split_flag("--msg= -x y ") == ("--msg", " -x y ")
