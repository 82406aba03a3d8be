import pytest
from hypothesis import given
from hypothesis import strategies as st

from imagetext.errors import ConfigurationError, ErrorKind, TextOverflowError
from imagetext.layout import LineAllocator, LineSlot, distribute, make_slots, split_words, uniform_slots


def words_per_line(slots):
    return [slot.words for slot in slots]


class TestSplitWords:
    def test_splits_on_single_spaces(self):
        assert split_words("a bb ccc") == ["a", "bb", "ccc"]

    def test_consecutive_spaces_keep_empty_words(self):
        assert split_words("a  b") == ["a", "", "b"]

    def test_empty_text_has_no_words(self):
        assert split_words("") == []


class TestDistribute:
    def test_example_sentence_fits_three_lines(self):
        slots = make_slots(25, 30, 23)

        distribute("Thanks for using our image text PHP library!", slots)

        assert words_per_line(slots) == [
            ["Thanks", "for", "using", "our", "image"],
            ["text", "PHP", "library!"],
            [],
        ]
        assert [s.used_chars for s in slots] == [22, 15, 0]
        assert slots[0].full is True
        assert slots[1].full is False

    def test_word_rejected_by_only_slot_overflows(self):
        slots = make_slots(5)

        with pytest.raises(TextOverflowError) as exc_info:
            distribute("Hello world", slots)

        assert exc_info.value.word == "world"
        assert slots[0].words == ["Hello"]
        assert slots[0].full is True

    def test_joining_space_is_not_charged(self):
        slots = uniform_slots(2, 10)

        distribute("a bb ccc dddd", slots)

        assert words_per_line(slots) == [["a", "bb", "ccc", "dddd"], []]
        assert slots[0].used_chars == 10
        # Joined text is longer than the nominal budget
        assert len(slots[0].text) == 13

    def test_empty_text_leaves_slots_empty(self):
        slots = uniform_slots(3, 10)

        distribute("", slots)

        assert all(slot.is_empty for slot in slots)
        assert not any(slot.full for slot in slots)

    def test_empty_text_with_no_slots_succeeds(self):
        assert list(distribute("", [])) == []

    def test_text_with_no_slots_overflows(self):
        with pytest.raises(TextOverflowError):
            distribute("hi", [])

    def test_word_longer_than_every_slot_overflows(self):
        slots = make_slots(5, 10)

        with pytest.raises(TextOverflowError):
            distribute("abcdefghijk", slots)

        assert all(slot.full for slot in slots)
        assert all(slot.is_empty for slot in slots)

    def test_running_out_of_slots_overflows(self):
        with pytest.raises(TextOverflowError):
            distribute("aaaa bbbb cccc", uniform_slots(2, 4))

    def test_full_slot_is_never_reconsidered(self):
        slots = make_slots(5, 5)

        distribute("abcd efgh i", slots)

        # "i" would fit after "abcd", but that line is already full
        assert words_per_line(slots) == [["abcd"], ["efgh", "i"]]

    def test_empty_words_are_placed_literally(self):
        slots = make_slots(10)

        distribute("a  b", slots)

        assert slots[0].words == ["a", "", "b"]
        assert slots[0].used_chars == 2
        assert slots[0].text == "a  b"

    def test_returns_the_given_slots(self):
        slots = make_slots(10)

        assert LineAllocator().distribute("hi", slots) is slots

    def test_overflow_error_is_tagged(self):
        with pytest.raises(OverflowError) as exc_info:
            distribute("Hello world", make_slots(5))

        assert exc_info.value.kind == ErrorKind.OVERFLOW


class TestSlotReuse:
    def test_reusing_slots_without_reset_accumulates_state(self):
        slots = uniform_slots(2, 10)
        distribute("a bb ccc dddd", slots)

        distribute("a bb ccc dddd", slots)

        assert words_per_line(slots) == [["a", "bb", "ccc", "dddd"], ["a", "bb", "ccc", "dddd"]]
        with pytest.raises(TextOverflowError):
            distribute("a bb ccc dddd", slots)

    def test_reset_restores_fresh_behavior(self):
        slots = uniform_slots(2, 10)
        distribute("a bb ccc dddd", slots)
        distribute("a bb ccc dddd", slots)

        for slot in slots:
            slot.reset()
        distribute("a bb ccc dddd", slots)

        assert words_per_line(slots) == [["a", "bb", "ccc", "dddd"], []]

    def test_empty_copies_budget_only(self):
        slot = LineSlot(max_chars=7, used_chars=3, words=["abc"], full=True)

        fresh = slot.empty()

        assert fresh == LineSlot(max_chars=7)

    def test_negative_budget_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            LineSlot(max_chars=-1)

        assert exc_info.value.kind == ErrorKind.CONFIGURATION


@given(
    words=st.lists(st.text(alphabet="abc", min_size=1, max_size=8), max_size=20),
    widths=st.lists(st.integers(min_value=0, max_value=20), max_size=5),
)
def test_distribution_keeps_every_word_once_in_order(words, widths):
    slots = make_slots(*widths)

    try:
        distribute(" ".join(words), slots)
    except TextOverflowError:
        assert all(slot.full for slot in slots)
        return

    assert [word for slot in slots for word in slot.words] == words
    for slot in slots:
        assert slot.used_chars == sum(len(word) for word in slot.words)
        assert slot.used_chars <= slot.max_chars
