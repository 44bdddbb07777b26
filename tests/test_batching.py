"""Test batch splitting"""

import pytest

from hearitfresh.curation.batching import split


class TestSplit:
    """Test split()"""

    def test_empty_input_gives_no_chunks(self):
        """Empty input yields [] rather than [[]]"""
        assert split([], 20) == []

    def test_last_chunk_may_be_shorter(self):
        """Chunks keep order and only the last one is short"""
        items = list(range(45))
        chunks = split(items, 20)

        assert [len(c) for c in chunks] == [20, 20, 5]
        assert [x for chunk in chunks for x in chunk] == items

    def test_exact_multiple(self):
        """No trailing empty chunk when the size divides evenly"""
        assert split(['a', 'b', 'c', 'd'], 2) == [['a', 'b'], ['c', 'd']]

    def test_smaller_than_batch(self):
        """Short input is a single chunk"""
        assert split(('x', 'y'), 100) == [['x', 'y']]

    @pytest.mark.parametrize('size', [0, -1])
    def test_non_positive_size_rejected(self, size):
        """A batch size below 1 is a caller bug"""
        with pytest.raises(ValueError):
            split([1, 2, 3], size)
