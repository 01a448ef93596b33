import pytest

from carfind.index.trie import ASCII_ALPHABET
from carfind.service.completion import CompletionService, LoadReport, strip_qualifier

VOCAB = ["Toyota Corolla", "Toyota Camry", "Tesla Model 3"]


@pytest.fixture
def service():
    s = CompletionService()
    s.load(VOCAB)
    return s


def test_toyota_scenario(service):
    assert service.suggest("toyota") == ["toyota camry", "toyota corolla"]


def test_tesla_scenario(service):
    assert service.suggest("tesla") == ["tesla model 3"]


def test_no_match_returns_empty(service):
    assert service.suggest("honda") == []


def test_query_is_case_insensitive(service):
    assert service.suggest("TOYOTA") == service.suggest("toyota")


def test_exact_word_suggests_itself(service):
    assert service.suggest("Tesla Model 3") == ["tesla model 3"]


def test_empty_prefix_orders_by_length(service):
    assert service.suggest("") == ["toyota camry", "tesla model 3", "toyota corolla"]


def test_ties_keep_traversal_order():
    s = CompletionService()
    s.load(["ac", "ab", "ad"])
    first = s.suggest("a")
    assert first == ["ab", "ac", "ad"]
    assert s.suggest("a") == first


def test_limit_truncates_ranked_results(service):
    assert service.suggest("t", limit=1) == ["toyota camry"]
    assert service.suggest("t", limit=10) == service.suggest("t")


def test_strip_qualifier():
    assert strip_qualifier("sedan or similar") == "sedan"
    assert strip_qualifier("nissan versa or similar automatic") == "nissan versa automatic"
    assert strip_qualifier("kia rio") == "kia rio"


def test_qualifier_removed_from_suggestions():
    s = CompletionService()
    s.load(["Sedan or similar"])
    assert s.suggest("sedan") == ["sedan"]
    assert all(" or similar" not in out for out in s.suggest(""))


def test_distinct_words_with_same_stripped_form_are_all_returned():
    s = CompletionService()
    s.load(["Sedan", "Sedan or similar"])
    assert s.suggest("sed") == ["sedan", "sedan"]


def test_load_reports_counts():
    s = CompletionService()
    report = s.load(["Kia Rio", None, 42, {"name": "Kia Soul"}, "Kia Rio"])
    assert report == LoadReport(inserted=2, skipped=3)
    assert len(s) == 1


def test_empty_and_blank_strings_are_valid_entries():
    s = CompletionService()
    assert s.load(["", "a"]) == LoadReport(inserted=2, skipped=0)
    assert s.suggest("") == ["", "a"]
    assert s.load(["   "]) == LoadReport(inserted=1, skipped=0)
    assert s.suggest(" ") == ["   "]


def test_load_twice_is_idempotent(service):
    before = {p: service.suggest(p) for p in ["", "t", "toyota", "tesla", "honda"]}
    service.load(VOCAB)
    service.load(VOCAB)
    after = {p: service.suggest(p) for p in before}
    assert after == before


def test_load_replaces_previous_index(service):
    service.load(["Kia Rio"])
    assert service.suggest("toyota") == []
    assert service.suggest("kia") == ["kia rio"]


def test_failed_load_keeps_previous_index(service):
    def broken_source():
        yield "Kia Rio"
        raise OSError("vocabulary source went away")

    with pytest.raises(OSError):
        service.load(broken_source())

    assert service.suggest("toyota") == ["toyota camry", "toyota corolla"]
    assert service.suggest("kia") == []


def test_unsupported_characters_are_skipped():
    s = CompletionService(alphabet=ASCII_ALPHABET)
    report = s.load(["Škoda Octavia", "Kia Rio"])
    assert report == LoadReport(inserted=1, skipped=1)
    assert s.suggest("š") == []
    assert s.suggest("k") == ["kia rio"]


def test_suggest_before_load_is_empty():
    assert CompletionService().suggest("anything") == []
