import math

import pytest

from wordseg.dicttrie import DictTrie, DictUnit, WeightOption

DICT = "苹果 3 n\n香蕉 1 n\n橙 2 n\n"
STATIC = ("苹果", "香蕉", "橙")


def test_weights_are_log_probabilities():
    trie = DictTrie(DICT)
    total = sum(math.exp(trie.find(word).weight) for word in STATIC)
    assert total == pytest.approx(1.0)
    assert all(trie.find(word).weight < 0 for word in STATIC)


def test_weight_order_and_min_weight():
    trie = DictTrie(DICT)
    apple, banana, orange = (trie.find(word).weight for word in STATIC)
    assert apple > orange > banana
    assert trie.min_weight() == banana


def test_find_returns_unit_with_tag():
    trie = DictTrie(DICT)
    unit = trie.find("苹果")
    assert isinstance(unit, DictUnit)
    assert (unit.word, unit.tag) == ("苹果", "n")
    assert trie.find("葡萄") is None
    assert "香蕉" in trie and len(trie) == 3


@pytest.mark.parametrize(
    "option, reference",
    [
        (WeightOption.MIN, "香蕉"),
        (WeightOption.MEDIAN, "橙"),
        (WeightOption.MAX, "苹果"),
    ],
)
def test_default_user_weight_follows_option(option, reference):
    trie = DictTrie(DICT, weight_option=option)
    unit = trie.insert_user_word("葡萄")
    assert unit.weight == trie.find(reference).weight
    assert trie.find("葡萄") == unit


def test_insert_with_frequency_matches_static_word():
    trie = DictTrie(DICT)
    unit = trie.insert_user_word("葡萄", 3, "nz")
    assert unit.weight == pytest.approx(trie.find("苹果").weight)
    assert trie.find("葡萄").tag == "nz"


def test_delete_user_word():
    trie = DictTrie(DICT)
    trie.insert_user_word("葡萄")
    assert trie.delete_user_word("葡萄") is True
    assert trie.find("葡萄") is None
    assert trie.delete_user_word("葡萄") is False


def test_user_dict_lines_at_construction():
    trie = DictTrie(DICT, ["西瓜", "瓜 x", "葡萄 3 nz", ""])
    assert trie.find("西瓜").tag == ""
    assert trie.find("西瓜").weight == trie.find("橙").weight
    assert trie.find("瓜").tag == "x"
    assert trie.is_user_dict_single_chinese_word("瓜")
    assert not trie.is_user_dict_single_chinese_word("西")
    assert trie.find("葡萄").weight == pytest.approx(trie.find("苹果").weight)
    assert trie.find("葡萄").tag == "nz"


def test_load_user_dict_after_construction():
    trie = DictTrie(DICT)
    trie.load_user_dict(["桃 t\n", "李子"])
    assert trie.find("桃").tag == "t"
    assert trie.is_user_dict_single_chinese_word("桃")
    assert trie.find("李子") is not None and trie.find("李子").word == "李子"


def test_user_line_overrides_static_word():
    trie = DictTrie(DICT, ["香蕉 v"])
    assert trie.find("香蕉").tag == "v"
    assert trie.min_weight() < trie.find("香蕉").weight


@pytest.mark.parametrize("text", ["苹果 3\n", "", "苹果 0 n\n", "苹果 3 n\n\n香蕉 1 n\n"])
def test_bad_dictionary_raises(text):
    with pytest.raises(ValueError):
        DictTrie(text)