import pytest

from wordseg.hmm import B, E, S, HMMModel, HMMSegment

MODEL = """\
# start
-1 -3.14e+100 -3.14e+100 -1
# trans
-3.14e+100 -0.1 -2 -3.14e+100
-1 -3.14e+100 -3.14e+100 -1
-3.14e+100 -0.5 -1 -3.14e+100
-1 -3.14e+100 -3.14e+100 -1
# emit B
中:-1,国:-10
# emit E
国:-1,中:-10
# emit M
中:-10
# emit S
人:-1
"""


@pytest.fixture
def model():
    return HMMModel(MODEL)


@pytest.fixture
def segment(model):
    return HMMSegment(model)


def test_model_probabilities_loaded(model):
    assert model.start_prob[B] == -1.0
    assert model.trans_prob[B][E] == -0.1
    assert model.emit_prob(B, "中", 0.5) == -1.0
    assert model.emit_prob(S, "中", 0.5) == 0.5


def test_viterbi_states(segment):
    assert segment.viterbi("中国人") == [B, E, S]
    assert segment.viterbi("") == []


def test_cut_chinese(segment):
    assert segment.cut("中国人") == ["中国", "人"]


def test_cut_keeps_ascii_words_whole(segment):
    assert segment.cut("ab中国") == ["ab", "中国"]


def test_cut_keeps_numbers_whole(segment):
    assert segment.cut("3.14") == ["3.14"]


@pytest.mark.parametrize(
    "sentence", ["中国 人", "hello, world", "a1b2 中国人。x", "人人人", ""]
)
def test_cut_covers_sentence(segment, sentence):
    words = segment.cut(sentence)
    assert "".join(words) == sentence
    assert all(words)


def test_from_file(tmp_path):
    path = tmp_path / "hmm.model"
    path.write_text(MODEL, encoding="utf-8")
    loaded = HMMModel.from_file(path)
    assert loaded.emit_prob(E, "国", 0.0) == -1.0


def test_wrong_start_count_is_error():
    with pytest.raises(ValueError):
        HMMModel(MODEL.replace("-1 -3.14e+100 -3.14e+100 -1\n# trans", "-1 -1\n# trans"))


def test_emit_entry_without_colon_is_error():
    with pytest.raises(ValueError):
        HMMModel(MODEL.replace("人:-1", "人-1"))


def test_emit_key_must_be_single_character():
    with pytest.raises(ValueError):
        HMMModel(MODEL.replace("人:-1", "人人:-1"))


def test_truncated_model_is_error():
    with pytest.raises(ValueError):
        HMMModel(MODEL.split("# emit S")[0])