import pytest

from wordseg.config import ArgvContext, Config


def test_get_trims_and_skips_comments():
    config = Config("# comment\n  name = value  \n\nport=8080\n")
    assert config.get("name", "none") == "value"
    assert config.get("port", "none") == "8080"


def test_get_returns_default_for_missing_key():
    config = Config("a=b")
    assert config.get("missing", "fallback") == "fallback"


def test_get_int_parses_value_and_default():
    config = Config("n = 42\nword = abc")
    assert config.get_int("n", 7) == 42
    assert config.get_int("missing", 7) == 7
    assert config.get_int("word", 7) == 0


def test_getitem_and_missing_key():
    config = Config("x=1")
    assert config["x"] == "1"
    with pytest.raises(KeyError):
        config["y"]


def test_bool_reflects_contents():
    assert not Config("# only comments\n")
    assert Config("k=v")


def test_duplicate_key_is_error():
    with pytest.raises(ValueError):
        Config("a=1\na=2")


def test_line_without_single_equals_is_error():
    with pytest.raises(ValueError):
        Config("just a line")
    with pytest.raises(ValueError):
        Config("a=b=c")


def test_from_file(tmp_path):
    path = tmp_path / "app.conf"
    path.write_text("dict = data/dict.dat\n", encoding="utf-8")
    assert Config.from_file(path).get("dict", "") == "data/dict.dat"


def test_argv_positional_options_and_flags():
    ctx = ArgvContext(["prog", "file", "-n", "5", "-v"])
    assert ctx[0] == "prog"
    assert ctx[1] == "file"
    assert ctx[2] == ""
    assert ctx["-n"] == "5"
    assert ctx["-v"] == ""
    assert ctx.has_key("-v")
    assert ctx.has_key("-n")
    assert not ctx.has_key("-x")


def test_argv_option_followed_by_option_is_flag():
    ctx = ArgvContext(["-a", "-b", "val"])
    assert ctx.has_key("-a")
    assert ctx["-a"] == ""
    assert ctx["-b"] == "val"
    assert ctx[0] == ""