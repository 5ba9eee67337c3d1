import pytest

from app.schemas.portfolio import PortfolioRecord
from app.services.tier_matcher import MatchTier, TierMatcher


@pytest.fixture
def matcher(synonyms):
    return TierMatcher(synonyms)


@pytest.fixture
def jane(make_record):
    return make_record("Dr Jane Smith", ("Cardiology", "Heart care"))


@pytest.fixture
def john(make_record):
    return make_record("Dr John Doe", ("Dermatology", "Skin care"))


@pytest.fixture
def associates(make_record):
    return make_record("Cardiology Associates", ("Dermatology", "Skin care"))


def names(matches):
    return [m.record.name for m in matches]


class TestExactTier:
    @pytest.mark.parametrize("text", ["jane", "Dr Jane", "smith", "JANE SMITH", "e s"])
    def test_name_substring(self, matcher, jane, john, text):
        matches = matcher.match(text, [jane, john])
        assert names(matches) == ["Dr Jane Smith"]
        assert matches[0].score == 1.0
        assert matches[0].tier is MatchTier.EXACT

    def test_speciality_title(self, matcher, jane, john):
        matches = matcher.match("cardiology", [jane, john])
        assert names(matches) == ["Dr Jane Smith"]
        assert matches[0].tier is MatchTier.EXACT

    def test_speciality_description(self, matcher, jane, john):
        matches = matcher.match("heart", [jane, john])
        assert names(matches) == ["Dr Jane Smith"]

    def test_keeps_corpus_order(self, matcher, jane, john):
        matches = matcher.match("dr", [john, jane])
        assert names(matches) == ["Dr John Doe", "Dr Jane Smith"]

    def test_empty_query_browses_everything(self, matcher, jane, john, associates):
        matches = matcher.match("", [jane, john, associates])
        assert names(matches) == ["Dr Jane Smith", "Dr John Doe", "Cardiology Associates"]
        assert all(m.tier is MatchTier.EXACT for m in matches)

    def test_short_circuits_later_tiers(self, matcher, make_record):
        by_name = make_record("Dr Heart")
        clinical = make_record("Dr Ann Lee", ("Cardiology", "Adult patients"))
        # "heart" is also a lay synonym of cardiology, but the name hit wins alone
        matches = matcher.match("heart", [by_name, clinical])
        assert names(matches) == ["Dr Heart"]
        assert matches[0].tier is MatchTier.EXACT


class TestSynonymTier:
    def test_lay_term_finds_clinical_speciality(self, matcher, make_record, john):
        clinical = make_record("Dr Ann Lee", ("Cardiology", "Adult patients"))
        matches = matcher.match("Heart", [clinical, john])
        assert names(matches) == ["Dr Ann Lee"]
        assert matches[0].tier is MatchTier.SYNONYM
        assert matches[0].score == 1.0

    def test_british_spelling_in_corpus(self, matcher, make_record):
        record = make_record("Dr Ann Lee", ("Paediatrics", "Care for young patients"))
        matches = matcher.match("pediatrics", [record])
        assert names(matches) == ["Dr Ann Lee"]
        assert matches[0].tier is MatchTier.SYNONYM

    def test_american_spelling_in_corpus(self, matcher, make_record):
        record = make_record("Dr Ann Lee", ("Pediatrics", "Care for young patients"))
        matches = matcher.match("paediatrics", [record])
        assert matches[0].tier is MatchTier.SYNONYM

    def test_synonym_must_match_exactly(self, matcher, make_record):
        clinical = make_record("Dr Ann Lee", ("Cardiology", "Adult patients"))
        assert matcher.synonym_matches("hearts", [clinical]) == []


class TestFuzzyTier:
    @pytest.fixture
    def alice(self, make_record):
        return make_record("Dr Alice Adams", ("Cardiology", "Cardiac care clinic"))

    @pytest.fixture
    def bob(self, make_record):
        return make_record("Dr Bob Brown", ("Heart", "General cardiology"))

    def test_misspelling_matches_via_synonym_similarity(self, matcher, alice, bob):
        matches = matcher.match("cardiak", [alice, bob])
        assert names(matches) == ["Dr Alice Adams", "Dr Bob Brown"]
        assert all(m.tier is MatchTier.FUZZY for m in matches)

    def test_binary_relevance_score(self, matcher, alice, bob):
        matches = matcher.match("cardiak", [alice, bob])
        # Bob's speciality title is itself a cardiology synonym
        assert [m.score for m in matches] == [0.0, 1.0]

    def test_all_tokens_must_be_covered(self, matcher, jane):
        assert matcher.match("heart zzzz", [jane]) == []

    def test_multi_token_query(self, matcher, jane):
        matches = matcher.match("cardiak care", [jane])
        assert names(matches) == ["Dr Jane Smith"]
        assert matches[0].tier is MatchTier.FUZZY
        assert matches[0].score == 0.0

    def test_nothing_found_is_empty(self, matcher, jane, john):
        assert matcher.match("xyznonexistent", [jane, john]) == []


class TestSpecialityFilter:
    def test_narrows_name_matches(self, matcher, make_record, jane):
        john_smith = make_record("Dr John Smith", ("Dermatology", "Skin care"))
        matches = matcher.match("smith", [jane, john_smith], speciality="cardiology")
        assert names(matches) == ["Dr Jane Smith"]

    def test_name_only_match_is_filtered_out(self, matcher, jane, associates):
        matches = matcher.match("", [jane, associates], speciality="Cardiology")
        assert names(matches) == ["Dr Jane Smith"]

    def test_filter_applies_to_later_tiers(self, matcher, jane, john):
        assert names(matcher.match("skin care", [jane, john])) == ["Dr John Doe"]
        assert matcher.match("skin care", [jane, john], speciality="cardiology") == []

    def test_filter_keeps_synonym_matches(self, matcher, make_record):
        clinic = make_record("Dr Ann Lee", ("Cardiology clinic", "Adult patients"))
        ward = make_record("Dr Bob Brown", ("Cardiology", "Adult patients"))
        assert names(matcher.match("heart", [clinic, ward])) == ["Dr Ann Lee", "Dr Bob Brown"]

        matches = matcher.match("heart", [clinic, ward], speciality="cardiology clinic")
        assert names(matches) == ["Dr Ann Lee"]
        assert matches[0].tier is MatchTier.SYNONYM

    def test_filter_keeps_fuzzy_matches(self, matcher, make_record):
        clinic = make_record("Dr Ann Lee", ("Cardiology clinic", "Cardiac care"))
        skin = make_record("Dr Bob Brown", ("Dermatology", "General cardiology care"))
        assert names(matcher.match("cardiak care", [clinic, skin])) == ["Dr Ann Lee", "Dr Bob Brown"]

        matches = matcher.match("cardiak care", [clinic, skin], speciality="clinic")
        assert names(matches) == ["Dr Ann Lee"]
        assert matches[0].tier is MatchTier.FUZZY

    def test_blank_filter_is_ignored(self, matcher, jane, john):
        assert len(matcher.match("", [jane, john], speciality="   ")) == 2


class TestIncompleteRecords:
    def test_missing_specialities(self, matcher):
        bare = PortfolioRecord(name="Dr No Specialities", url="bare", specialities=None)
        assert bare.specialities == []
        assert matcher.match("cardiology", [bare]) == []
        assert names(matcher.match("specialities", [bare])) == ["Dr No Specialities"]

    def test_missing_description(self, matcher):
        record = PortfolioRecord(
            name="Dr Partial",
            url="partial",
            specialities=[{"title": "Oncology"}],
        )
        assert names(matcher.match("tumor", [record])) == ["Dr Partial"]
