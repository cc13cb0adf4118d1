"""Prefix markers understood by the command parsers."""

from __future__ import annotations

from core.parser.tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_GITHUB_ID = Prefix("g/")
PREFIX_NUS_NETWORK_ID = Prefix("u/")
PREFIX_TYPE = Prefix("ty/")
PREFIX_STUDENT_ID = Prefix("s/")
PREFIX_TUTORIAL_ID = Prefix("tut/")

PERSON_FIELD_PREFIXES: tuple[Prefix, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_GITHUB_ID,
    PREFIX_NUS_NETWORK_ID,
    PREFIX_TYPE,
    PREFIX_STUDENT_ID,
    PREFIX_TUTORIAL_ID,
)

# Every field except tags may be given at most once.
SINGLE_VALUED_PREFIXES: tuple[Prefix, ...] = tuple(p for p in PERSON_FIELD_PREFIXES if p != PREFIX_TAG)
