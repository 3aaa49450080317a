import pytest

from password_strength import Configuration, RuleKind
from password_strength.rule import RULES, format_message, get_rule


def test_rules_follow_registry_order():
    assert [rule.kind for rule in RULES] == [
        RuleKind.MIN_LENGTH,
        RuleKind.MAX_LENGTH,
        RuleKind.CHECK_USERNAME,
        RuleKind.CHECK_EMAIL,
        RuleKind.MIN_LOWER,
        RuleKind.MIN_UPPER,
        RuleKind.MIN_NUMERIC,
        RuleKind.MIN_SPECIAL,
    ]


def test_get_rule_accepts_configuration_key():
    assert get_rule("minSpecial") is get_rule(RuleKind.MIN_SPECIAL)


def test_format_message_substitutes_placeholders():
    assert (
        format_message(
            "at least {n} character{plural} ({found} found)",
            {"n": 3, "found": 1, "plural": "s"},
        )
        == "at least 3 characters (1 found)"
    )


def test_format_message_keeps_unknown_placeholders():
    assert format_message("{n} of {total}", {"n": 1}) == "1 of {total}"


def test_format_message_without_params():
    assert format_message("no {placeholders} here", {}) == "no {placeholders} here"


def test_min_length_message():
    rule = get_rule(RuleKind.MIN_LENGTH)

    assert rule.apply("abc", None, Configuration()) == (
        "Password should contain at least 4 characters (3 found)!"
    )
    assert rule.apply("abcd", None, Configuration()) is None


def test_singular_threshold():
    rule = get_rule(RuleKind.MIN_UPPER)

    assert rule.apply("abc", None, Configuration(min_upper=1)) == (
        "Password should contain at least 1 upper case character (0 found)!"
    )


def test_max_length_only_when_set():
    rule = get_rule(RuleKind.MAX_LENGTH)

    assert rule.apply("a" * 100, None, Configuration()) is None
    assert rule.apply("a" * 11, None, Configuration(max_length=10)) == (
        "Password should contain at most 10 characters (11 found)!"
    )
    assert rule.apply("a" * 10, None, Configuration(max_length=10)) is None


@pytest.mark.parametrize(
    "kind, password, found",
    [
        (RuleKind.MIN_LOWER, "aXbYc", 3),
        (RuleKind.MIN_UPPER, "aXbYc", 2),
        (RuleKind.MIN_NUMERIC, "1a2b3c4", 4),
        (RuleKind.MIN_SPECIAL, "a!b@c#", 3),
        (RuleKind.MIN_SPECIAL, "a_b_c", 0),
        (RuleKind.MIN_UPPER, "ÄÖÜ", 0),
    ],
)
def test_character_classes_count_every_occurrence(kind, password, found):
    config = Configuration(
        min_lower=10, min_upper=10, min_numeric=10, min_special=10
    )

    assert get_rule(kind).evaluate(password, None, config) == {
        "n": 10,
        "found": found,
        "plural": "s",
    }


def test_zero_minimum_never_fails():
    config = Configuration(min_lower=0, min_upper=0, min_numeric=0, min_special=0)

    for kind in (
        RuleKind.MIN_LOWER,
        RuleKind.MIN_UPPER,
        RuleKind.MIN_NUMERIC,
        RuleKind.MIN_SPECIAL,
    ):
        assert get_rule(kind).apply("", None, config) is None


def test_username_is_matched_case_insensitively():
    rule = get_rule(RuleKind.CHECK_USERNAME)

    assert rule.apply("xxMYPASSxx", "mypass", Configuration()) == (
        "Password cannot contain the username"
    )
    assert rule.apply("xxMYPASSxx", "other", Configuration()) is None


@pytest.mark.parametrize("username", [None, ""])
def test_username_rule_needs_a_username(username):
    rule = get_rule(RuleKind.CHECK_USERNAME)

    assert rule.apply("abc", username, Configuration()) is None


def test_username_rule_can_be_disabled():
    config = Configuration(check_username=False)

    assert get_rule(RuleKind.CHECK_USERNAME).apply("alice1", "alice", config) is None


@pytest.mark.parametrize(
    "password",
    [
        "contact@example.com",
        "Contact@Example.COM",
        "first.last+tag@mail.example.org",
        "root@10.0.0.1:8080",
        "xx12!john@example.com",
    ],
)
def test_email_is_detected(password):
    assert get_rule(RuleKind.CHECK_EMAIL).apply(password, None, Configuration()) == (
        "Password cannot contain an email address"
    )


@pytest.mark.parametrize(
    "password",
    [
        "Ab1!Cd2@",
        "user@localhost",
        "@example.com",
        "P@ss.word1!",
        "me@example.com secret",
    ],
)
def test_email_is_not_detected(password):
    assert get_rule(RuleKind.CHECK_EMAIL).apply(password, None, Configuration()) is None


def test_email_rule_can_be_disabled():
    config = Configuration(check_email=False)

    assert get_rule(RuleKind.CHECK_EMAIL).apply("a@example.com", None, config) is None
