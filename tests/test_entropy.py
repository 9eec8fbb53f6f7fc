"""
Tests for Entropy Sources
=========================
SystemEntropySource and entropy-source validation.
"""

import copy
import pickle

import pytest

from secure_randstr import EntropySource, NullEntropySource, SystemEntropySource
from secure_randstr.core.entropy import require_entropy_source


class TestSystemEntropySource:
    def test_range(self):
        source = SystemEntropySource()
        values = {source.randbelow(3) for _ in range(500)}
        assert values == {0, 1, 2}

    def test_single_value_bound(self):
        assert SystemEntropySource().randbelow(1) == 0

    @pytest.mark.parametrize("bad", [0, -5])
    def test_non_positive_bound(self, bad):
        with pytest.raises(ValueError):
            SystemEntropySource().randbelow(bad)

    def test_satisfies_protocol(self):
        assert isinstance(SystemEntropySource(), EntropySource)

    def test_copy_and_deepcopy(self):
        source = SystemEntropySource()
        assert copy.copy(source) is source
        assert copy.deepcopy(source) is source

    def test_pickle(self):
        restored = pickle.loads(pickle.dumps(SystemEntropySource()))
        assert restored.randbelow(5) in range(5)


class TestRequireEntropySource:
    def test_accepts_duck_typed_source(self, fixed_source):
        source = fixed_source([0])
        assert require_entropy_source(source) is source

    def test_rejects_none(self):
        with pytest.raises(NullEntropySource):
            require_entropy_source(None)

    def test_rejects_non_callable_attribute(self):
        class Broken:
            randbelow = 4

        with pytest.raises(NullEntropySource):
            require_entropy_source(Broken())
