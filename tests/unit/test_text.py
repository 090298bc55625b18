"""Unit tests for Text construction, queries, slicing and transforms.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from fluentext import Text
from fluentext.core import (
    InvalidArgumentError,
    InvalidInputError,
    InvalidPatternError,
    InvariantViolationError,
    NotFoundError,
    OutOfRangeError,
)

STRING = "Super string Is a Class"
SUBSTRING = "Is a"


class ToStringObject:
    """Implements the Stringable protocol."""

    def __init__(self, value: str) -> None:
        self.value = value

    def to_string(self) -> str:
        return self.value


class DunderStrObject:
    """Only overrides __str__."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value


class BothMethodsObject(DunderStrObject):
    """Has both; to_string() should win."""

    def to_string(self) -> str:
        return "from to_string"


class TestCreate:
    """Test Text.create coercion behavior."""

    def test_wraps_plain_string(self) -> None:
        """A str is kept as is."""
        assert Text.create(STRING).to_string() == STRING

    def test_coerces_float(self) -> None:
        """Numbers become their standard string form."""
        assert Text.create(1.23).to_string() == "1.23"

    def test_coerces_int(self) -> None:
        """Integers become their decimal string."""
        assert Text.create(42).to_string() == "42"

    def test_rejects_true(self) -> None:
        """True is not acceptable input."""
        with pytest.raises(InvalidInputError):
            Text.create(True)

    def test_rejects_false(self) -> None:
        """False is not acceptable input."""
        with pytest.raises(InvalidInputError):
            Text.create(False)

    def test_rejects_none(self) -> None:
        """None is rejected by the constructor invariant."""
        with pytest.raises(InvariantViolationError):
            Text.create(None)

    def test_uses_to_string_method(self) -> None:
        """Objects with to_string() are rendered through it."""
        assert Text.create(ToStringObject(STRING)).to_string() == STRING

    def test_uses_dunder_str(self) -> None:
        """Objects overriding __str__ are rendered through it."""
        assert Text.create(DunderStrObject(STRING)).to_string() == STRING

    def test_prefers_to_string_over_dunder_str(self) -> None:
        """to_string() is checked before __str__."""
        assert Text.create(BothMethodsObject(STRING)).to_string() == "from to_string"

    def test_rejects_bytes(self) -> None:
        """Byte strings are not decoded implicitly."""
        with pytest.raises(InvalidInputError):
            Text.create(b"abc")

    def test_rejects_object_without_string_form(self) -> None:
        """Plain objects have no canonical string form."""
        with pytest.raises(InvalidInputError):
            Text.create(object())

    def test_invalid_input_is_a_type_error(self) -> None:
        """InvalidInputError can be caught as TypeError."""
        with pytest.raises(TypeError):
            Text.create(True)

    def test_copies_existing_text(self) -> None:
        """Creating from a Text yields an equal value."""
        text = Text.create(STRING)
        assert Text.create(text) == text

    def test_clone_is_distinct_instance(self) -> None:
        """clone() returns a new object."""
        text = Text.create(STRING)
        assert text.clone() is not text


class TestImmutability:
    """Test that transforms never modify the receiver."""

    def test_transform_leaves_original_unchanged(self) -> None:
        """uppercase() returns a new value and keeps the old one."""
        text = Text.create(STRING)
        text.uppercase()
        assert text.to_string() == STRING

    def test_equal_values_hash_equal(self) -> None:
        """Equal texts can be used interchangeably as dict keys."""
        assert {Text.create("a"): 1}[Text.create("a")] == 1

    def test_not_equal_to_plain_string(self) -> None:
        """Text does not compare equal to a bare str."""
        assert Text.create("a") != "a"


class TestQueries:
    """Test read-only queries."""

    def test_length(self) -> None:
        """length() counts characters."""
        assert Text.create(STRING).length() == 23

    def test_len_builtin(self) -> None:
        """len() agrees with length()."""
        assert len(Text.create(STRING)) == 23

    def test_contains_case_sensitive(self) -> None:
        """Matching case is found."""
        assert Text.create(STRING).contains("Super string") is True

    def test_contains_case_sensitive_miss(self) -> None:
        """Different case is not found by default."""
        assert Text.create(STRING).contains("Super String") is False

    def test_contains_case_insensitive(self) -> None:
        """Case-insensitive mode lower-cases both sides."""
        assert Text.create(STRING).contains("super string", False) is True

    def test_contains_case_insensitive_miss(self) -> None:
        """Case-insensitive mode still requires the substring."""
        assert Text.create(STRING).contains("string super", False) is False

    def test_matches_regex(self) -> None:
        """A matching pattern returns True."""
        assert Text.create(STRING).matches_regex(r"string\s+Is") is True

    def test_does_not_match_regex(self) -> None:
        """A non-matching pattern returns False."""
        assert Text.create(STRING).matches_regex(r"^string") is False

    def test_malformed_regex_raises(self) -> None:
        """A pattern that does not compile raises InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            Text.create(STRING).matches_regex("[unclosed")

    def test_starts_with(self) -> None:
        """Prefix test."""
        assert Text.create(STRING).starts_with("Super") is True

    def test_ends_with(self) -> None:
        """Suffix test."""
        assert Text.create(STRING).ends_with("Class") is True

    def test_ends_with_miss(self) -> None:
        """Suffix test fails for text elsewhere in the value."""
        assert Text.create(STRING).ends_with("Super") is False

    def test_position_of(self) -> None:
        """First index of a substring."""
        assert Text.create(STRING).position_of(SUBSTRING) == 13

    def test_position_of_missing_raises(self) -> None:
        """An absent substring raises NotFoundError."""
        with pytest.raises(NotFoundError):
            Text.create(STRING).position_of("Super String")

    def test_last_position_of(self) -> None:
        """Rightmost index of a repeated substring."""
        assert Text.create("foo foo foo").last_position_of("foo") == 8

    def test_last_position_of_single_character(self) -> None:
        """Rightmost index of a closing bracket."""
        assert Text.create("[Here] you [are]").last_position_of("]") == 15

    def test_last_position_of_missing_raises(self) -> None:
        """An absent substring raises NotFoundError."""
        with pytest.raises(NotFoundError):
            Text.create("foo").last_position_of("bar")

    def test_character_at(self) -> None:
        """Single character at an index."""
        assert Text.create("ABCDE").character_at(4) == "E"

    def test_character_at_past_end_raises(self) -> None:
        """Index equal to the length is out of range."""
        with pytest.raises(OutOfRangeError):
            Text.create("ABCDE").character_at(5)

    def test_character_at_negative_raises(self) -> None:
        """Negative indexes are out of range."""
        with pytest.raises(OutOfRangeError):
            Text.create("ABCDE").character_at(-1)

    def test_count(self) -> None:
        """Counts every occurrence."""
        assert Text.create("a abc abcd").count("a") == 3

    def test_count_none(self) -> None:
        """Zero when absent."""
        assert Text.create("a abc abcd").count("e") == 0

    def test_count_treats_needle_literally(self) -> None:
        """Regex metacharacters in the needle are matched literally."""
        assert Text.create("a.b a.b axb").count("a.b") == 2

    def test_equals(self) -> None:
        """Structural equality."""
        assert Text.create(STRING).equals(Text.create(STRING)) is True

    def test_to_json(self) -> None:
        """Serializes as a JSON string literal."""
        assert Text.create('say "hi"').to_json() == '"say \\"hi\\""'


class TestSlicing:
    """Test slicing operations."""

    def test_first(self) -> None:
        """Leading characters."""
        assert Text.create(STRING).first(5).to_string() == "Super"

    def test_first_clamps(self) -> None:
        """Asking for more than the length returns everything."""
        assert Text.create(STRING).first(1000).to_string() == STRING

    def test_first_whole_length_is_identity(self) -> None:
        """first(length()) equals the original."""
        text = Text.create(STRING)
        assert text.first(text.length()) == text

    def test_first_negative_raises(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            Text.create(STRING).first(-6)

    def test_last(self) -> None:
        """Trailing characters."""
        assert Text.create(STRING).last(5).to_string() == "Class"

    def test_last_clamps(self) -> None:
        """Asking for more than the length returns everything."""
        assert Text.create(STRING).last(1000).to_string() == STRING

    def test_last_zero_is_empty(self) -> None:
        """last(0) has no characters."""
        assert Text.create(STRING).last(0).to_string() == ""

    def test_last_whole_length_is_identity(self) -> None:
        """last(length()) equals the original."""
        text = Text.create(STRING)
        assert text.last(text.length()) == text

    def test_last_negative_raises(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            Text.create(STRING).last(-6)

    def test_all_but_the_first(self) -> None:
        """Drops leading characters."""
        assert Text.create(STRING).all_but_the_first(3).to_string() == "er string Is a Class"

    def test_all_but_the_first_too_many_raises(self) -> None:
        """Dropping more than the length is rejected."""
        with pytest.raises(InvalidArgumentError):
            Text.create("abc").all_but_the_first(4)

    def test_all_but_the_last(self) -> None:
        """Drops trailing characters."""
        assert Text.create(STRING).all_but_the_last(3).to_string() == "Super string Is a Cl"

    def test_all_but_the_last_zero_is_identity(self) -> None:
        """Dropping nothing keeps everything."""
        assert Text.create("abc").all_but_the_last(0).to_string() == "abc"

    def test_all_but_the_last_too_many_raises(self) -> None:
        """Dropping more than the length is rejected."""
        with pytest.raises(InvalidArgumentError):
            Text.create("abc").all_but_the_last(4)

    def test_before(self) -> None:
        """Text before the first occurrence."""
        assert Text.create(STRING).before(SUBSTRING).to_string() == "Super string "

    def test_after(self) -> None:
        """Text after the first occurrence."""
        assert Text.create(STRING).after(SUBSTRING).to_string() == " Class"

    def test_before_missing_raises(self) -> None:
        """An absent needle raises NotFoundError."""
        with pytest.raises(NotFoundError):
            Text.create(STRING).before("nope")

    def test_after_missing_raises(self) -> None:
        """An absent needle raises NotFoundError."""
        with pytest.raises(NotFoundError):
            Text.create(STRING).after("nope")

    def test_trim(self) -> None:
        """Strips surrounding whitespace."""
        assert Text.create(" Class ").trim().to_string() == "Class"

    def test_left_pad(self) -> None:
        """Pads on the left to the target length."""
        assert Text.create("length_is11").left_pad(15).to_string() == "    length_is11"

    def test_right_pad(self) -> None:
        """Pads on the right to the target length."""
        assert Text.create("length_is11").right_pad(15).to_string() == "length_is11    "

    def test_pad_cycles_multi_character_padding(self) -> None:
        """Multi-character padding repeats and is cut to fit."""
        assert Text.create("ab").left_pad(5, "xy").to_string() == "xyxab"

    def test_pad_noop_when_long_enough(self) -> None:
        """No padding is added when already at the target length."""
        assert Text.create("abcdef").right_pad(3).to_string() == "abcdef"

    def test_empty_padding_raises(self) -> None:
        """Padding must not be empty."""
        with pytest.raises(InvalidArgumentError):
            Text.create("ab").left_pad(5, "")

    def test_concatenate(self) -> None:
        """Joins two values in order."""
        result = Text.create("This is ").concatenate(Text.create("a string"))
        assert result.to_string() == "This is a string"


class TestCaseTransforms:
    """Test case and format transforms."""

    def test_uppercase(self) -> None:
        """Upper-cases everything."""
        assert Text.create(STRING).uppercase().to_string() == "SUPER STRING IS A CLASS"

    def test_lowercase(self) -> None:
        """Lower-cases everything."""
        assert Text.create(STRING).lowercase().to_string() == "super string is a class"

    def test_lowercase_first(self) -> None:
        """Only the first character is lower-cased."""
        assert Text.create("THIS IS A STRING").lowercase_first().to_string() == "tHIS IS A STRING"

    def test_lowercase_first_empty(self) -> None:
        """Empty input stays empty."""
        assert Text.create("").lowercase_first().to_string() == ""

    def test_lowercase_first_with_expanding_first_character(self) -> None:
        """A first character that upper-cases to two characters is kept intact."""
        assert Text.create("\u00dfa b").lowercase_first().to_string() == "\u00dfa B"

    def test_lowercase_first_leading_space(self) -> None:
        """After leading whitespace the first word is capitalized."""
        assert Text.create(" abc def").lowercase_first().to_string() == " Abc Def"

    def test_uppercase_words(self) -> None:
        """Capitalizes the start of each word."""
        assert Text.create("these are some words").uppercase_words().to_string() == (
            "These Are Some Words"
        )

    def test_uppercase_words_leaves_other_letters(self) -> None:
        """Characters after the first are untouched."""
        assert Text.create("mIXED cASE").uppercase_words().to_string() == "MIXED CASE"

    def test_uppercase_words_after_tab(self) -> None:
        """Any whitespace starts a new word."""
        assert Text.create("a\tb\nc").uppercase_words().to_string() == "A\tB\nC"

    def test_title_case(self) -> None:
        """Alias of uppercase_words."""
        assert Text.create("This is a string").title_case().to_string() == "This Is A String"

    def test_camel_case(self) -> None:
        """Words are joined with an initial lower-case letter."""
        assert Text.create("This is a string").camel_case().to_string() == "thisIsAString"

    def test_camel_case_strips_special_characters(self) -> None:
        """Special characters are removed before joining."""
        assert Text.create("This& is* a{ string ").camel_case().to_string() == "thisIsAString"

    def test_pascal_case(self) -> None:
        """Words are joined keeping the initial capital."""
        assert Text.create("This is a string").pascal_case().to_string() == "ThisIsAString"

    def test_snake_case(self) -> None:
        """Lower-cased words joined with underscores."""
        assert Text.create("This is a string").snake_case().to_string() == "this_is_a_string"

    def test_slug(self) -> None:
        """Lower-cased words joined with hyphens."""
        assert Text.create("This is a string").slug().to_string() == "this-is-a-string"

    def test_slug_strips_special_characters(self) -> None:
        """Punctuation does not survive in a slug."""
        assert Text.create("Hello, World!").slug().to_string() == "hello-world"

    def test_replace_special_characters(self) -> None:
        """Special characters are deleted by default."""
        assert Text.create("This& is* a{ string").replace_special_characters().to_string() == (
            "This is a string"
        )

    def test_replace_special_characters_with_replacement(self) -> None:
        """Special characters can be replaced instead of deleted."""
        assert Text.create("a&b").replace_special_characters("+").to_string() == "a+b"

    def test_replace_special_characters_with_custom_pattern(self) -> None:
        """A custom pattern overrides the default character class."""
        assert Text.create("a1b2").replace_special_characters("", r"\d").to_string() == "ab"


class TestReplace:
    """Test replace operations."""

    def test_replace_one(self) -> None:
        """Only the first occurrence is replaced."""
        assert Text.create("foo bar foo").replace_one("foo", "baz").to_string() == "baz bar foo"

    def test_replace_one_missing_raises(self) -> None:
        """An absent needle raises NotFoundError."""
        with pytest.raises(NotFoundError):
            Text.create("foo bar").replace_one("qux", "baz")

    def test_replace_all(self) -> None:
        """Every occurrence is replaced."""
        assert Text.create("foo bar foo").replace_all("foo", "baz").to_string() == "baz bar baz"

    def test_replace_all_missing_is_noop(self) -> None:
        """Replacing an absent needle changes nothing."""
        assert Text.create("foo").replace_all("qux", "baz").to_string() == "foo"

    def test_regex_replace_one(self) -> None:
        """Only the first match is replaced."""
        text = Text.create("This were a string were")
        assert text.regex_replace_one("foo", "were").to_string() == "This foo a string were"

    def test_regex_replace_all(self) -> None:
        """Every match is replaced."""
        text = Text.create("This were a string were")
        assert text.regex_replace_all("foo", "were").to_string() == "This foo a string foo"

    def test_regex_replace_with_group_reference(self) -> None:
        """Replacement strings may reference groups."""
        text = Text.create("2024-01-31")
        assert text.regex_replace_all(r"\3/\2/\1", r"(\d+)-(\d+)-(\d+)").to_string() == (
            "31/01/2024"
        )

    def test_regex_replace_malformed_raises(self) -> None:
        """A malformed pattern raises InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            Text.create("abc").regex_replace_all("x", "(")

    def test_regex_replace_bad_escape_in_replacement_raises(self) -> None:
        """An unknown escape in the replacement raises InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            Text.create("a-b").regex_replace_all(r"C:\dir", "-")

    def test_regex_replace_one_missing_group_raises(self) -> None:
        """A reference to a group the pattern lacks raises InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            Text.create("abc").regex_replace_one(r"\1", "b")

    def test_regex_replace_error_keeps_pattern(self) -> None:
        """The error carries the pattern the replacement was used with."""
        with pytest.raises(InvalidPatternError) as exc_info:
            Text.create("abc").regex_replace_all(r"\2", "(b)")
        assert exc_info.value.pattern == "(b)"


class TestSplit:
    """Test split behavior."""

    def test_split(self) -> None:
        """Splits on a literal separator."""
        text = Text.create("String A/String B/String C")
        assert text.split("/").to_list() == ["String A", "String B", "String C"]

    def test_split_without_separator_returns_whole(self) -> None:
        """An absent separator yields a single element."""
        text = Text.create("String A/String B/String C")
        assert text.split(".").to_list() == ["String A/String B/String C"]

    def test_split_join_round_trip(self) -> None:
        """Joining the parts with the same separator restores the value."""
        text = Text.create("String A/String B/String C")
        assert text.split("/").join("/") == text

    def test_split_empty_separator_raises(self) -> None:
        """An empty separator is rejected."""
        with pytest.raises(InvalidArgumentError):
            Text.create("abc").split("")
