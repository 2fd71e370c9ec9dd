"""Tests for building code hint preferences."""

import pytest
from pydantic import ValidationError

from jscodehints.domain.preferences import (
    DEFAULT_EXCLUDED_FILES,
    DEFAULT_MAX_FILE_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    Preferences,
    RawPreferences,
    build_preferences,
)


class TestDefaults:
    """Tests for default preferences."""

    def test_no_prefs_uses_defaults(self):
        """Test missing preferences give built-in defaults"""
        prefs = Preferences.from_raw(None)
        assert prefs.get_excluded_directories() is None
        assert prefs.get_excluded_files() is DEFAULT_EXCLUDED_FILES
        assert prefs.get_max_file_count() == 100
        assert prefs.get_max_file_size() == 524288

    def test_default_constructor_matches_from_raw(self):
        """Test Preferences() equals the defaulted build"""
        assert Preferences() == Preferences.from_raw()

    def test_empty_object_uses_defaults(self):
        """Test an empty object gives defaults"""
        prefs = build_preferences({})
        assert prefs.get_excluded_directories() is None
        assert prefs.get_max_file_count() == DEFAULT_MAX_FILE_COUNT
        assert prefs.get_max_file_size() == DEFAULT_MAX_FILE_SIZE

    @pytest.mark.parametrize("prefs", [[1, 2], "text", 7])
    def test_non_mapping_uses_defaults(self, prefs):
        """Test non-object preferences give defaults"""
        assert build_preferences(prefs) == Preferences()

    @pytest.mark.parametrize("name", ["require.js", "require-2.1.js", "jquery.js", "jquery.min.js", "less-1.3.min.js"])
    def test_default_excluded_files(self, name):
        """Test built-in excluded file names"""
        assert Preferences().get_excluded_files().matches(name)

    @pytest.mark.parametrize("name", ["main.js", "less.js", "Require.js", "myjquery.js", "jquery.jsx"])
    def test_default_does_not_exclude_other_files(self, name):
        """Test the built-in list is anchored and case-sensitive"""
        assert not Preferences().get_excluded_files().matches(name)

    def test_file_name_constant(self):
        """Test preferences file name"""
        assert Preferences.FILE_NAME == ".jscodehints"


class TestNumericFallback:
    """Tests for max-file-count and max-file-size sanity checks."""

    @pytest.mark.parametrize("value", [-5, 0, None, "42", True, [], float("nan"), float("inf"), 0.5])
    def test_invalid_count_uses_default(self, value):
        """Test invalid max-file-count falls back to 100"""
        assert build_preferences({"max-file-count": value}).get_max_file_count() == 100

    def test_absent_count_uses_default(self):
        """Test absent max-file-count falls back to 100"""
        assert build_preferences({"excluded-files": []}).get_max_file_count() == 100

    def test_valid_count_kept(self):
        """Test positive max-file-count is used"""
        assert build_preferences({"max-file-count": 42}).get_max_file_count() == 42

    def test_float_count_truncated(self):
        """Test positive float limits are truncated"""
        assert build_preferences({"max-file-count": 42.9}).get_max_file_count() == 42

    @pytest.mark.parametrize("value", [-1, 0, "big", False])
    def test_invalid_size_uses_default(self, value):
        """Test invalid max-file-size falls back to 512 KiB"""
        assert build_preferences({"max-file-size": value}).get_max_file_size() == 524288

    def test_valid_size_kept(self):
        """Test positive max-file-size is used"""
        assert build_preferences({"max-file-size": 1024}).get_max_file_size() == 1024


class TestExclusions:
    """Tests for directory and file exclusions."""

    def test_directories_have_no_default(self):
        """Test directories are absent without user patterns"""
        assert build_preferences({"excluded-directories": []}).get_excluded_directories() is None
        assert build_preferences({"excluded-directories": "tests"}).get_excluded_directories() is None

    def test_directories_do_not_include_file_defaults(self):
        """Test directory matcher does not pick up the file defaults"""
        matcher = build_preferences({"excluded-directories": ["test"]}).get_excluded_directories()
        assert matcher.matches("test")
        assert not matcher.matches("require.js")

    def test_files_union_with_defaults(self):
        """Test user file patterns are added to the built-in list"""
        matcher = build_preferences({"excluded-files": ["foo.js"]}).get_excluded_files()
        assert matcher.matches("foo.js")
        assert matcher.matches("require.js")
        assert not matcher.matches("bar.js")

    def test_non_list_files_use_default(self):
        """Test a non-list excluded-files value gives the default matcher"""
        assert build_preferences({"excluded-files": "foo.js"}).get_excluded_files() is DEFAULT_EXCLUDED_FILES

    def test_end_to_end(self):
        """Test the documented example preferences"""
        prefs = build_preferences(
            {
                "excluded-directories": ["/ex[\\w]*ed/"],
                "excluded-files": ["jquery*.js"],
                "max-file-count": 100,
                "max-file-size": 524288,
            }
        )
        directories = prefs.get_excluded_directories()
        assert directories.matches("excluded")
        assert directories.matches("exited")
        assert not directories.matches("other")

        files = prefs.get_excluded_files()
        assert files.matches("jquery-2.1.js")
        assert files.matches("require.js")
        assert not files.matches("jquery")

        assert prefs.get_max_file_count() == 100
        assert prefs.get_max_file_size() == 524288

    def test_invalid_raw_pattern_never_raises(self):
        """Test malformed raw patterns do not break construction"""
        prefs = build_preferences({"excluded-directories": ["/[/"], "excluded-files": ["/(/"]})
        assert prefs.get_excluded_directories() is None
        assert prefs.get_excluded_files() is DEFAULT_EXCLUDED_FILES

    def test_unrepresentable_raw_patterns_never_raise(self):
        """Test huge repeat counts and deep nesting do not break construction"""
        nested = "/" + "(" * 5000 + "a" + ")" * 5000 + "/"
        prefs = build_preferences(
            {"excluded-directories": [nested], "excluded-files": ["/a{4294967296}/", "foo.js"]}
        )
        assert prefs.get_excluded_directories() is None
        assert prefs.get_excluded_files().matches("foo.js")
        assert prefs.get_excluded_files().matches("require.js")


class TestImmutability:
    """Tests for immutability and repeatability."""

    def test_assignment_rejected(self):
        """Test preferences cannot be modified"""
        prefs = Preferences()
        with pytest.raises(ValidationError):
            prefs.max_file_count = 5

    def test_building_twice_is_equivalent(self):
        """Test same input gives behaviorally equal preferences"""
        raw = {"excluded-directories": ["node_*"], "excluded-files": ["d3*"], "max-file-count": 7}
        first = build_preferences(raw)
        second = build_preferences(raw)
        assert first == second
        for name in ["node_modules", "src", "d3.v4.js", "require.js", "app.js"]:
            assert first.get_excluded_files().matches(name) == second.get_excluded_files().matches(name)
            assert first.get_excluded_directories().matches(name) == second.get_excluded_directories().matches(name)
        assert raw["excluded-files"] == ["d3*"]

    def test_direct_construction_validates_limits(self):
        """Test direct construction rejects non-positive limits"""
        with pytest.raises(ValidationError, match="max_file_count"):
            Preferences(max_file_count=0)


class TestRawPreferences:
    """Tests for RawPreferences."""

    def test_aliases(self):
        """Test JSON keys map to fields"""
        raw = RawPreferences.model_validate(
            {"excluded-directories": ["a"], "excluded-files": ["b"], "max-file-count": 3, "max-file-size": 9}
        )
        assert raw.excluded_directories == ["a"]
        assert raw.excluded_files == ["b"]
        assert raw.max_file_count == 3
        assert raw.max_file_size == 9

    def test_unknown_keys_ignored(self):
        """Test extra keys do not fail validation"""
        raw = RawPreferences.model_validate({"unknown": True})
        assert raw.excluded_files is None

    def test_field_names_are_not_file_keys(self):
        """Test snake_case keys in a preferences file have no effect"""
        raw = RawPreferences.model_validate({"excluded_files": ["b"], "max_file_count": 3})
        assert raw.excluded_files is None
        assert raw.max_file_count is None
        assert build_preferences({"max_file_count": 3}).get_max_file_count() == 100

    def test_malformed_values_dropped(self):
        """Test malformed values become None"""
        raw = RawPreferences.model_validate({"excluded-files": 5, "max-file-size": -3})
        assert raw.excluded_files is None
        assert raw.max_file_size is None
