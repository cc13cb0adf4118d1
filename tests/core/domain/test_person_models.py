"""
Unit Tests for Person, AddressBook and Predicates
"""

import pytest
from pydantic import ValidationError

from core.domain.address_book import AddressBook
from core.domain.models import Person
from core.domain.predicates import NameContainsKeywordsPredicate, show_all_persons
from core.domain.values import Name, NusNetworkId, Tag
from core.errors import DuplicatePersonError, NullArgumentError, PersonNotFoundError


class TestPerson:
    """Tests for Person identity and rendering."""

    def test_is_same_person_when_same_object_then_true(self, amy):
        assert amy.is_same_person(amy)

    def test_is_same_person_when_none_then_false(self, amy):
        assert not amy.is_same_person(None)

    def test_is_same_person_when_only_network_id_matches_then_true(self, amy, bob):
        """Every other field may differ."""
        twin = bob.model_copy(update={"nus_network_id": amy.nus_network_id})
        assert amy.is_same_person(twin)
        assert twin.is_same_person(amy)

    def test_is_same_person_when_network_id_differs_then_false(self, make_person):
        assert not make_person().is_same_person(make_person(nus_network_id="e9999999"))

    def test_is_same_person_when_network_id_case_differs_then_false(self, make_person):
        """Network IDs compare as raw strings."""
        assert not make_person(nus_network_id="e0000001").is_same_person(make_person(nus_network_id="E0000001"))

    def test_eq_when_all_fields_equal_then_equal(self, make_person):
        assert make_person() == make_person()

    def test_eq_when_one_field_differs_then_not_equal(self, make_person):
        assert make_person() != make_person(phone="99999999")
        assert make_person() != make_person(tags=("colleague",))

    def test_eq_when_tag_order_differs_then_equal(self, make_person):
        """Tags are a set."""
        assert make_person(tags=("a", "b")) == make_person(tags=("b", "a"))

    def test_setattr_when_frozen_then_raises(self, amy):
        with pytest.raises(ValidationError):
            amy.name = Name("Other")

    def test_optional_fields_when_omitted_then_none(self, bob):
        assert bob.student_id is None
        assert bob.tutorial_id is None

    def test_init_when_required_field_missing_then_raises(self, amy):
        fields = {name: getattr(amy, name) for name in ("name", "phone", "email", "address")}
        with pytest.raises(ValidationError):
            Person(**fields)

    def test_sorted_tags_when_called_then_alphabetical(self, make_person):
        person = make_person(tags=("zeta", "alpha", "mid"))
        assert [tag.value for tag in person.sorted_tags()] == ["alpha", "mid", "zeta"]

    def test_str_when_student_then_lists_every_field(self, amy):
        text = str(amy)
        for part in ("Amy Bee", "11111111", "amy@example.com", "amy-bee", "e0000001", "student", "A0000001X", "[friend]"):
            assert part in text

    def test_str_when_optional_fields_missing_then_omitted(self, bob):
        text = str(bob)
        assert "Student ID" not in text
        assert "Tutorial" not in text
        assert "Tags: [friend], [husband]" in text


class TestAddressBook:
    """Tests for AddressBook uniqueness and ordering."""

    def test_init_when_empty_then_no_persons(self):
        book = AddressBook()
        assert len(book) == 0
        assert book.persons == ()

    def test_init_when_duplicates_given_then_raises(self, amy):
        with pytest.raises(DuplicatePersonError):
            AddressBook([amy, amy])

    def test_add_person_when_new_then_appended_in_order(self, amy, bob):
        book = AddressBook()
        book.add_person(amy)
        book.add_person(bob)
        assert list(book) == [amy, bob]

    def test_add_person_when_same_network_id_then_raises(self, amy, make_person):
        book = AddressBook([amy])
        with pytest.raises(DuplicatePersonError):
            book.add_person(make_person(name="Someone Else"))

    def test_has_person_when_identity_matches_then_true(self, amy, make_person):
        book = AddressBook([amy])
        assert book.has_person(make_person(phone="999"))

    def test_has_person_when_none_then_raises(self):
        with pytest.raises(NullArgumentError):
            AddressBook().has_person(None)

    def test_set_person_when_edited_then_position_kept(self, amy, bob):
        book = AddressBook([amy, bob])
        edited = amy.model_copy(update={"name": Name("Amy Tan")})
        book.set_person(amy, edited)
        assert book.persons == (edited, bob)

    def test_set_person_when_target_missing_then_raises(self, amy, bob):
        with pytest.raises(PersonNotFoundError):
            AddressBook([amy]).set_person(bob, bob)

    def test_set_person_when_edit_collides_with_other_then_raises(self, amy, bob):
        book = AddressBook([amy, bob])
        clash = amy.model_copy(update={"nus_network_id": bob.nus_network_id})
        with pytest.raises(DuplicatePersonError):
            book.set_person(amy, clash)

    def test_set_person_when_identity_unchanged_then_allowed(self, amy):
        book = AddressBook([amy])
        edited = amy.model_copy(update={"tags": frozenset({Tag("ta")})})
        book.set_person(amy, edited)
        assert book.persons == (edited,)

    def test_remove_person_when_present_then_removed(self, amy, bob):
        book = AddressBook([amy, bob])
        book.remove_person(amy)
        assert book.persons == (bob,)

    def test_remove_person_when_absent_then_raises(self, amy, bob):
        with pytest.raises(PersonNotFoundError):
            AddressBook([amy]).remove_person(bob)

    def test_reset_data_when_called_then_copies_other(self, amy, bob):
        book = AddressBook([amy])
        book.reset_data(AddressBook([bob]))
        assert book == AddressBook([bob])

    def test_persons_when_returned_then_not_live_view(self, amy, bob):
        book = AddressBook([amy])
        snapshot = book.persons
        book.add_person(bob)
        assert snapshot == (amy,)


class TestPredicates:
    """Tests for list filters."""

    def test_show_all_persons_when_called_then_true(self, amy):
        assert show_all_persons(amy)

    @pytest.mark.parametrize("keywords", [("amy",), ("BEE",), ("carl", "Amy")])
    def test_name_keywords_when_whole_word_matches_then_true(self, amy, keywords):
        assert NameContainsKeywordsPredicate(keywords)(amy)

    @pytest.mark.parametrize("keywords", [("am",), ("Amy Bee",), ("carl",), ()])
    def test_name_keywords_when_no_whole_word_matches_then_false(self, amy, keywords):
        assert not NameContainsKeywordsPredicate(keywords)(amy)

    def test_name_keywords_when_other_field_matches_then_false(self, amy):
        """Only the name is searched."""
        assert not NameContainsKeywordsPredicate(("amy@example.com", "11111111"))(amy)

    def test_eq_when_same_keywords_then_equal(self):
        assert NameContainsKeywordsPredicate(("a", "b")) == NameContainsKeywordsPredicate(("a", "b"))
        assert NameContainsKeywordsPredicate(("a",)) != NameContainsKeywordsPredicate(("b",))


def test_network_id_value_object_is_used_for_identity(amy):
    assert isinstance(amy.nus_network_id, NusNetworkId)
