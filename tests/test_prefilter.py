import pytest

from wordseg.prefilter import PreFilter, make_separators


def pieces(pre):
    return [pre.text[start:end] for start, end in pre]


def test_default_separators_split_text():
    pre = PreFilter("ab\uff0ccd")
    assert pieces(pre) == ["ab", "\uff0c", "cd"]


def test_pieces_cover_sentence():
    sentence = " 中国\t人民。 hello world "
    pre = PreFilter(sentence)
    assert "".join(pieces(pre)) == sentence
    spans = list(pre)
    assert all(a < b for a, b in spans)
    assert all(spans[i][1] == spans[i + 1][0] for i in range(len(spans) - 1))


def test_each_separator_is_its_own_piece():
    pre = PreFilter("a  b")
    assert pieces(pre) == ["a", " ", " ", "b"]


def test_custom_symbols():
    pre = PreFilter("x-y z", make_separators("-"))
    assert pieces(pre) == ["x", "-", "y z"]


def test_bytes_input_is_decoded():
    pre = PreFilter("中 国".encode("utf-8"))
    assert pre.text == "中 国"
    assert pieces(pre) == ["中", " ", "国"]


def test_empty_sentence_has_no_pieces():
    assert list(PreFilter("")) == []


def test_make_separators_rejects_duplicates():
    with pytest.raises(ValueError):
        make_separators("--")


def test_make_separators_contents():
    assert make_separators("ab") == frozenset({ord("a"), ord("b")})