from protoc_name_mapper.naming.identifier_chars import (
    IDENTIFIER_CONTINUATION_RANGES,
    IDENTIFIER_HEAD_RANGES,
    is_identifier_continuation,
    is_identifier_head,
)


class TestTables:
    def test_ranges_are_sorted_and_disjoint(self):
        for ranges in (IDENTIFIER_HEAD_RANGES, IDENTIFIER_CONTINUATION_RANGES):
            for (first, last), (next_first, _) in zip(ranges, ranges[1:]):
                assert first <= last < next_first


class TestIdentifierHead:
    def test_ascii_letters_and_underscore(self):
        for char in "azAZ_":
            assert is_identifier_head(char)

    def test_digits_are_not_heads(self):
        assert not is_identifier_head("0")
        assert not is_identifier_head("9")

    def test_latin_and_cjk(self):
        assert is_identifier_head("\u00e9")
        assert is_identifier_head("\u4e2d")

    def test_supplementary_plane(self):
        assert is_identifier_head("\U0001F600")

    def test_punctuation_is_rejected(self):
        for char in "-$ .\t":
            assert not is_identifier_head(char)

    def test_boundaries(self):
        assert is_identifier_head("\u00d6")
        assert not is_identifier_head("\u00d7")
        assert is_identifier_head("\u00d8")
        assert not is_identifier_head("\ufffe")


class TestIdentifierContinuation:
    def test_digits(self):
        assert is_identifier_continuation("0")

    def test_combining_marks(self):
        assert is_identifier_continuation("\u0301")
        assert not is_identifier_head("\u0301")
        assert is_identifier_continuation("\u20d0")

    def test_superset_of_head(self):
        for char in "aZ_\u00e9\u4e2d":
            assert is_identifier_continuation(char)

    def test_punctuation_is_rejected(self):
        assert not is_identifier_continuation("-")
