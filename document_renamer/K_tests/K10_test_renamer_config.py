# document_renamer/K_tests/K10_test_renamer_config.py
"""
Tests for G_config.G01_renamer_config module.

Tests defaults, validation, overrides and YAML loading.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from A_core.A01_domain_models import DocumentType, PhysicianPlacement
from A_core.A02_exceptions import ConfigurationError
from G_config.G01_renamer_config import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    CenturyPolicy,
    ClassificationRule,
    MissingDatePolicy,
    RenamerConfig,
    load_config,
)


class TestDefaults:
    def test_policies(self, default_config):
        assert default_config.century_policy == CenturyPolicy.PIVOT
        assert default_config.century_pivot == 50
        assert default_config.missing_date_policy == MissingDatePolicy.RAISE
        assert default_config.mark_regarding is True

    def test_vocabularies(self, default_config):
        assert {"QME", "M.D.", "C&R", "W/C"} <= default_config.acronyms
        assert default_config.titles == frozenset({"dr.", "dr", "judge"})
        assert default_config.corrections[0] == ("emgncs", "EMG-NCS")

    def test_rule_order(self, default_config):
        assert [r.document_type for r in default_config.classification_rules] == [
            DocumentType.UR,
            DocumentType.LETTER,
            DocumentType.NOTICE,
            DocumentType.MED_LEGAL,
            DocumentType.MEDICAL,
        ]

    def test_placement(self, default_config):
        assert default_config.placement_for(DocumentType.NOTICE) == PhysicianPlacement.FOLD
        assert default_config.placement_for(DocumentType.MEDICAL) == PhysicianPlacement.APPEND
        assert default_config.placement_for(DocumentType.MED_LEGAL) == PhysicianPlacement.DISCARD

    def test_frozen(self, default_config):
        with pytest.raises(ValidationError):
            default_config.century_pivot = 30


class TestValidation:
    def test_acronyms_upper_cased(self):
        config = RenamerConfig(acronyms=["qme", " ptp ", ""])
        assert config.acronyms == frozenset({"QME", "PTP"})

    def test_titles_lower_cased(self):
        assert RenamerConfig(titles=["Judge"]).titles == frozenset({"judge"})

    def test_name_stop_words_lower_cased(self):
        assert RenamerConfig(name_stop_words=["Consult", " "]).name_stop_words == frozenset({"consult"})

    def test_default_name_stop_words_cover_keywords(self, default_config):
        assert {"report", "letter", "notice", "denial"} <= default_config.name_stop_words

    def test_corrections_from_mapping(self):
        config = RenamerConfig(corrections={"x-ray": "XR", "supp": "supplemental"})
        assert config.corrections == (("x-ray", "XR"), ("supp", "supplemental"))

    def test_placement_merged_over_defaults(self):
        config = RenamerConfig(physician_placement={"med-legal": "append"})
        assert config.placement_for(DocumentType.MED_LEGAL) == PhysicianPlacement.APPEND
        assert config.placement_for(DocumentType.NOTICE) == PhysicianPlacement.FOLD

    def test_invalid_rule_regex(self):
        with pytest.raises(ValidationError):
            ClassificationRule(pattern="(unclosed", document_type=DocumentType.UR)

    def test_rule_compile_is_case_insensitive(self):
        rule = ClassificationRule(pattern=r"\bdepo\b", document_type=DocumentType.MED_LEGAL)
        assert rule.compile().search("DEPO transcript")


class TestFromDict:
    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RenamerConfig.from_dict({"bogus": 1})
        assert exc_info.value.config_key == "bogus"

    def test_pivot_out_of_range(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RenamerConfig.from_dict({"century_pivot": 150})
        assert exc_info.value.config_key == "century_pivot"

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationError):
            RenamerConfig.from_dict({"century_policy": "nearest"})

    def test_empty_correction(self):
        with pytest.raises(ConfigurationError):
            RenamerConfig.from_dict({"corrections": [["", "x"]]})

    def test_invalid_rule(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RenamerConfig.from_dict({"classification_rules": [{"pattern": "(", "document_type": "UR"}]})
        assert exc_info.value.config_key.startswith("classification_rules")

    def test_none_gives_defaults(self):
        assert RenamerConfig.from_dict(None) == RenamerConfig()


class TestWithOverrides:
    def test_returns_new_config(self, default_config):
        changed = default_config.with_overrides(century_policy="always_2000")
        assert changed.century_policy == CenturyPolicy.ALWAYS_2000
        assert default_config.century_policy == CenturyPolicy.PIVOT
        assert changed.acronyms == default_config.acronyms
        assert changed.classification_rules == default_config.classification_rules

    def test_invalid_override(self, default_config):
        with pytest.raises(ConfigurationError):
            default_config.with_overrides(missing_date_policy="guess")


class TestYamlLoading:
    def test_bundled_config_matches_defaults(self):
        assert load_config(DEFAULT_CONFIG_PATH) == RenamerConfig()

    def test_load_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "renamer:\n"
            "  century_policy: always_2000\n"
            "  missing_date_policy: today\n"
            "  acronyms: [qme, ptp]\n"
            "  physician_placement:\n"
            "    med-legal: append\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.century_policy == CenturyPolicy.ALWAYS_2000
        assert config.missing_date_policy == MissingDatePolicy.TODAY
        assert config.acronyms == frozenset({"QME", "PTP"})
        assert config.placement_for(DocumentType.MED_LEGAL) == PhysicianPlacement.APPEND

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("renamer:\n  century_pivot: 30\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
        assert load_config().century_pivot == 30

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.yaml") == RenamerConfig()

    def test_missing_section_gives_defaults(self, tmp_path):
        path = tmp_path / "other.yaml"
        path.write_text("other:\n  key: 1\n", encoding="utf-8")
        assert load_config(path) == RenamerConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("renamer: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("renamer:\n  century_pivot: -1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.config_key == "century_pivot"
