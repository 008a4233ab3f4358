"""Mention Extraction — '@' followed by an email-shaped token in free text."""

import pytest

from classroom.core.extract_mentions import extract_mentions


def test_extracts_mentions_in_order():
    text = "Hello students! @studentagnes@gmail.com @studentmiche@gmail.com"
    assert extract_mentions(text) == [
        "studentagnes@gmail.com", "studentmiche@gmail.com",
    ]


def test_duplicates_are_dropped_keeping_first_occurrence():
    text = "@b@x.com then @a@x.com and again @b@x.com"
    assert extract_mentions(text) == ["b@x.com", "a@x.com"]


def test_trailing_punctuation_ends_the_token():
    text = "Hey @kid@school.edu, see you. Also @other@school.edu."
    assert extract_mentions(text) == ["kid@school.edu", "other@school.edu"]


def test_adjacent_mentions_split_on_punctuation():
    assert extract_mentions("@a@x.com,@b@y.org;@c@z.net") == [
        "a@x.com", "b@y.org", "c@z.net",
    ]


def test_punctuation_between_address_and_plain_text_is_a_boundary():
    assert extract_mentions("@a@x.com,b@y.org") == ["a@x.com"]


def test_parenthesised_mention():
    assert extract_mentions("(cc @kid@school.edu)") == ["kid@school.edu"]


@pytest.mark.parametrize("text", [
    "email me at kid@school.edu",
    "just an @ sign",
    "@ kid@school.edu",
    "@kid@school",
    "@@",
])
def test_no_valid_mention(text):
    assert extract_mentions(text) == []


@pytest.mark.parametrize("text", ["", None, 123, ["@a@b.com"]])
def test_empty_or_non_text_yields_empty_list(text):
    assert extract_mentions(text) == []


def test_mentions_keep_original_case():
    assert extract_mentions("@Kid@School.EDU") == ["Kid@School.EDU"]


@pytest.mark.parametrize("address", [
    "o'brien@school.edu",
    "who?@school.edu",
    "{kid}@school.edu",
    "hey!there@school.edu",
    "a(b)@school.edu",
])
def test_any_valid_local_part_can_be_mentioned(address):
    assert extract_mentions(f"hi @{address}") == [address]


def test_closing_quote_and_bracket_are_trimmed():
    assert extract_mentions("'@o'brien@school.edu' [@kid@school.edu]") == [
        "o'brien@school.edu", "kid@school.edu",
    ]


def test_trimmed_tail_that_breaks_the_shape_is_dropped():
    assert extract_mentions("@kid@school.)") == []
