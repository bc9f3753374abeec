# document_renamer/K_tests/K02_test_physician_normalizer.py
"""
Tests for B_parsing.B02_physician_normalizer module.
"""

from __future__ import annotations

import pytest

from B_parsing.B02_physician_normalizer import PhysicianNormalizer, mark_regarding


@pytest.fixture
def physician():
    return PhysicianNormalizer()


class TestMarkRegarding:
    def test_standalone_re(self):
        assert mark_regarding("QME report re Dr Smith") == "QME report re. Dr Smith"

    def test_case_preserved(self):
        assert mark_regarding("RE billing") == "RE. billing"

    def test_already_marked(self):
        assert mark_regarding("re. billing") == "re. billing"

    @pytest.mark.parametrize("text", ["re-evaluation", "you're welcome", "review", "pre op"])
    def test_not_a_connector(self, text):
        assert mark_regarding(text) == text


class TestTitlePattern:
    def test_title_first_last(self, physician):
        result = physician.extract("QME report Dr John Smith")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "QME report"

    def test_title_with_credential(self, physician):
        result = physician.extract("report Dr. John Smith, MD follow up")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "report follow up"

    def test_doctor_word(self, physician):
        assert physician.extract("notes from doctor Patel").doctor == "Dr. Patel"

    def test_initials(self, physician):
        assert physician.extract("Dr. J. R. Tolkien report").doctor == "Dr. Tolkien"

    def test_apostrophe_name(self, physician):
        assert physician.extract("report Dr O'Brien").doctor == "Dr. O'Brien"

    def test_title_case_insensitive(self, physician):
        assert physician.extract("DR. Smith report").doctor == "Dr. Smith"

    def test_regarding_connector_consumed(self, physician):
        result = physician.extract("QME report re Dr John Smith MD")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "QME report"

    def test_regarding_word_consumed(self, physician):
        result = physician.extract("letter regarding Dr Lee")
        assert result.remainder == "letter"

    def test_connector_kept_when_marking_disabled(self):
        result = PhysicianNormalizer(mark_regarding=False).extract("QME report re Dr John Smith MD")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "QME report re"

    def test_dash_run_after_match_collapsed(self, physician):
        result = physician.extract("Dr Smith – – report")
        assert result.remainder == "report"


class TestCredentialPattern:
    @pytest.mark.parametrize("credential", ["MD", "M.D.", "DO", "D.O.", "PhD", "Ph.D."])
    def test_credentials(self, physician, credential):
        result = physician.extract(f"report John Smith {credential}")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "report"

    def test_comma_before_credential(self, physician):
        assert physician.extract("Smith, MD report").doctor == "Dr. Smith"

    def test_title_pattern_wins(self, physician):
        result = physician.extract("Jane Doe MD referral to Dr Adams")
        assert result.doctor == "Dr. Adams"


class TestNoMatch:
    @pytest.mark.parametrize("text", ["QME report", "appt notice", "drive log", "md office"])
    def test_unchanged(self, physician, text):
        result = physician.extract(text)
        assert result.mention is None
        assert result.doctor is None
        assert result.remainder == text

    def test_span_recorded(self, physician):
        mention = physician.extract("PT Dr Lee").mention
        assert (mention.span.start, mention.span.end) == (3, 9)


class TestStopWords:
    def test_keyword_after_surname_kept(self, physician):
        result = physician.extract("Dr Smith Report")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "Report"

    def test_keyword_before_credential_name_kept(self, physician):
        result = physician.extract("Medical Report John Smith MD")
        assert result.doctor == "Dr. Smith"
        assert result.remainder == "Medical Report"

    def test_stop_word_prefix_still_a_name(self, physician):
        assert physician.extract("Dr Reporter").doctor == "Dr. Reporter"

    def test_custom_stop_words(self):
        physician = PhysicianNormalizer(stop_words=["consult"])
        result = physician.extract("Dr Lee Consult")
        assert result.doctor == "Dr. Lee"
        assert result.remainder == "Consult"

    def test_empty_stop_words_take_any_capitalized_word(self):
        assert PhysicianNormalizer(stop_words=[]).extract("Dr Smith Report").doctor == "Dr. Report"
